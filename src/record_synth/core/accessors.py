import logging
from collections.abc import Sequence

from record_synth.core.directives import resolve_directives
from record_synth.core.errors import Diagnostic, GenerationError, TypeArgumentError
from record_synth.core.type_args import extract_single_argument, reference_to, slice_of
from record_synth.models import (
    DirectiveFlags,
    FieldDefinition,
    FunctionBody,
    GeneratedFragment,
    GeneratedFunction,
    GenerationKind,
    Receiver,
    RecordTypeDefinition,
)

logger = logging.getLogger(__name__)


def exposed_fields(
    record: RecordTypeDefinition, flags: Sequence[DirectiveFlags]
) -> list[tuple[FieldDefinition, DirectiveFlags]]:
    """Non-public fields without ``skip``, in declaration order."""
    selected = []
    for field, field_flags in zip(record.fields, flags, strict=True):
        if field.is_public or field_flags.skip:
            logger.debug("No accessors for %s.%s", record.name, field.name)
            continue
        selected.append((field, field_flags))
    return selected


def _getter(field: FieldDefinition, flags: DirectiveFlags) -> GeneratedFunction:
    if flags.copy:
        return_type = field.ty
        tail = f"self.{field.name}"
    elif flags.as_slice:
        return_type = slice_of(extract_single_argument(field.ty))
        tail = f"self.{field.name}.as_slice()"
    else:
        return_type = reference_to(field.ty)
        tail = f"&self.{field.name}"
    return GeneratedFunction(
        name=field.name,
        receiver=Receiver.SHARED,
        return_type=return_type,
        body=FunctionBody(tail=tail),
    )


def synthesize_getters(
    record: RecordTypeDefinition,
    directives: Sequence[DirectiveFlags] | None = None,
) -> GeneratedFragment:
    """Generate one read accessor per exposed field.

    ``copy`` returns the value, ``as_slice`` returns ``&[T]`` for a
    ``Container<T>`` field and anything else returns ``&Type``. Fields whose
    type cannot back a slice are all reported together in one
    ``GenerationError``.
    """
    if not record.is_named_record:
        logger.debug("Skipping getters for %s: %s shape has no named fields", record.name, record.shape)
        return GeneratedFragment(type_name=record.name, kind=GenerationKind.GETTERS)

    flags = resolve_directives(record) if directives is None else directives
    functions: list[GeneratedFunction] = []
    diagnostics: list[Diagnostic] = []
    for field, field_flags in exposed_fields(record, flags):
        try:
            functions.append(_getter(field, field_flags))
        except TypeArgumentError as exc:
            diagnostics.append(
                Diagnostic(
                    message=f"as_slice: {exc.message}",
                    record=record.name,
                    field=field.name,
                    line=field.line if field.line is not None else record.line,
                )
            )

    if diagnostics:
        raise GenerationError(diagnostics)
    return GeneratedFragment(type_name=record.name, kind=GenerationKind.GETTERS, functions=functions)
