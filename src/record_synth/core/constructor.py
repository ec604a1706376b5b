import logging
from collections.abc import Sequence

from record_synth.core.directives import resolve_directives
from record_synth.models import (
    DirectiveFlags,
    FieldDefinition,
    FieldInitializer,
    FunctionBody,
    GeneratedFragment,
    GeneratedFunction,
    GenerationKind,
    Parameter,
    RecordTypeDefinition,
    StructLiteral,
    TypeDescriptor,
    TypeKind,
)

logger = logging.getLogger(__name__)

DEFAULT_CALL = "Default::default()"


def to_parameter(field: FieldDefinition) -> Parameter:
    """Build a fresh parameter from a field, dropping its attributes and visibility."""
    return Parameter(name=field.name, ty=field.ty)


def synthesize_constructor(
    record: RecordTypeDefinition,
    directives: Sequence[DirectiveFlags] | None = None,
) -> GeneratedFragment:
    """Generate ``pub fn new(...) -> Record``.

    Fields flagged ``default`` are left out of the signature and initialised
    with ``Default::default()``; every other field becomes a parameter, in
    declaration order.
    """
    if not record.is_named_record:
        logger.debug("Skipping constructor for %s: %s shape has no named fields", record.name, record.shape)
        return GeneratedFragment(type_name=record.name, kind=GenerationKind.CONSTRUCTOR)

    flags = resolve_directives(record) if directives is None else directives
    parameters: list[Parameter] = []
    initializers: list[FieldInitializer] = []
    for field, field_flags in zip(record.fields, flags, strict=True):
        if field_flags.default:
            initializers.append(FieldInitializer(member=field.name, value=DEFAULT_CALL))
        else:
            parameters.append(to_parameter(field))
            initializers.append(FieldInitializer(member=field.name, value=field.name))

    function = GeneratedFunction(
        name="new",
        parameters=parameters,
        return_type=TypeDescriptor(kind=TypeKind.PATH, text=record.name),
        body=FunctionBody(tail=StructLiteral(type_name=record.name, initializers=initializers)),
    )
    return GeneratedFragment(type_name=record.name, kind=GenerationKind.CONSTRUCTOR, functions=[function])
