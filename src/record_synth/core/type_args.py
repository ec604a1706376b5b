from record_synth.core.errors import TypeArgumentError
from record_synth.models import TypeDescriptor, TypeKind


def extract_single_argument(ty: TypeDescriptor) -> TypeDescriptor:
    """Return the first generic argument of the first path segment of ``ty``.

    ``Vec<u8>`` gives ``u8``. Only the leading segment is inspected, so a
    qualified ``std::vec::Vec<u8>`` is rejected like a bare ``u8``.
    """
    if ty.kind is not TypeKind.PATH or not ty.segments:
        raise TypeArgumentError("container type expected", ty)
    arguments = ty.segments[0].arguments
    if not arguments:
        raise TypeArgumentError("generic container type expected", ty)
    return arguments[0]


def reference_to(ty: TypeDescriptor, mutable: bool = False) -> TypeDescriptor:
    prefix = "&mut " if mutable else "&"
    return TypeDescriptor(kind=TypeKind.REFERENCE, text=f"{prefix}{ty.text}", element=ty, mutable=mutable)


def slice_of(ty: TypeDescriptor) -> TypeDescriptor:
    """Return ``&[ty]``, a shared slice reference over ``ty``."""
    inner = TypeDescriptor(kind=TypeKind.SLICE, text=f"[{ty.text}]", element=ty)
    return reference_to(inner)
