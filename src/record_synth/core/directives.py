import logging

from record_synth.models import Directive, DirectiveFlags, FieldDefinition, RecordTypeDefinition

logger = logging.getLogger(__name__)


def has_directive(field: FieldDefinition, token: str) -> bool:
    """Return True if any grouping attribute on ``field`` lists ``token`` as a nested item.

    The attribute path is not checked, and items that do not lead with an
    identifier (literals, punctuation) never match. Unknown tokens are ignored.
    """
    for attribute in field.attributes:
        if attribute.items is None:
            continue
        if any(item.ident == token for item in attribute.items):
            return True
    return False


def scan_directives(field: FieldDefinition) -> DirectiveFlags:
    present = {directive.value: False for directive in Directive}
    for attribute in field.attributes:
        for item in attribute.items or ():
            if item.ident in present:
                present[item.ident] = True
    return DirectiveFlags(**present)


def resolve_directives(record: RecordTypeDefinition) -> tuple[DirectiveFlags, ...]:
    """Compute the directive flags of every field once, in declaration order."""
    flags = tuple(scan_directives(field) for field in record.fields)
    logger.debug("Resolved directives for %s: %s", record.name, flags)
    return flags
