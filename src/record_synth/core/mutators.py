import logging
from collections.abc import Sequence

from record_synth.core.accessors import exposed_fields
from record_synth.core.directives import resolve_directives
from record_synth.core.type_args import reference_to
from record_synth.models import (
    DirectiveFlags,
    FunctionBody,
    GeneratedFragment,
    GeneratedFunction,
    GenerationKind,
    Parameter,
    Receiver,
    RecordTypeDefinition,
)

logger = logging.getLogger(__name__)


def synthesize_setters(
    record: RecordTypeDefinition,
    directives: Sequence[DirectiveFlags] | None = None,
) -> GeneratedFragment:
    """Generate ``set_<field>`` and ``<field>_as_mut`` for every exposed field."""
    if not record.is_named_record:
        logger.debug("Skipping setters for %s: %s shape has no named fields", record.name, record.shape)
        return GeneratedFragment(type_name=record.name, kind=GenerationKind.SETTERS)

    flags = resolve_directives(record) if directives is None else directives
    functions: list[GeneratedFunction] = []
    for field, _ in exposed_fields(record, flags):
        functions.append(
            GeneratedFunction(
                name=f"set_{field.bare_name}",
                receiver=Receiver.EXCLUSIVE,
                parameters=[Parameter(name="v", ty=field.ty)],
                body=FunctionBody(statements=[f"self.{field.name} = v;"]),
            )
        )
        functions.append(
            GeneratedFunction(
                name=f"{field.bare_name}_as_mut",
                receiver=Receiver.EXCLUSIVE,
                return_type=reference_to(field.ty, mutable=True),
                body=FunctionBody(tail=f"&mut self.{field.name}"),
            )
        )
    return GeneratedFragment(type_name=record.name, kind=GenerationKind.SETTERS, functions=functions)
