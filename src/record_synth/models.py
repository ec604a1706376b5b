from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class TypeKind(StrEnum):
    PATH = "path"
    REFERENCE = "reference"
    SLICE = "slice"
    ARRAY = "array"
    TUPLE = "tuple"
    OTHER = "other"


class PathSegment(_Frozen):
    name: str
    arguments: list["TypeDescriptor"] | None = None


class TypeDescriptor(_Frozen):
    kind: TypeKind
    text: str
    segments: list[PathSegment] = []
    element: "TypeDescriptor | None" = None
    mutable: bool = False

    def __str__(self) -> str:
        return self.text


PathSegment.model_rebuild()  # necessary for recursive types
TypeDescriptor.model_rebuild()


class MetaItem(_Frozen):
    """One comma-separated entry of a grouping attribute, e.g. ``skip`` in ``#[unprolix(skip)]``."""

    ident: str | None
    text: str


class Attribute(_Frozen):
    path: str
    items: list[MetaItem] | None = None
    text: str = ""

    @property
    def is_grouping(self) -> bool:
        return self.items is not None


class Visibility(StrEnum):
    PUBLIC = "public"
    NON_PUBLIC = "non_public"


class FieldDefinition(_Frozen):
    name: str
    ty: TypeDescriptor
    visibility: Visibility = Visibility.NON_PUBLIC
    attributes: list[Attribute] = []
    line: int | None = None

    @property
    def bare_name(self) -> str:
        """Field name without a raw-identifier ``r#`` prefix, for composing derived names."""
        return self.name.removeprefix("r#")

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


class RecordShape(StrEnum):
    NAMED = "named"
    TUPLE = "tuple"
    UNIT = "unit"
    ENUM = "enum"
    UNION = "union"


class GenerationKind(StrEnum):
    CONSTRUCTOR = "constructor"
    GETTERS = "getters"
    SETTERS = "setters"

    @property
    def derive_name(self) -> str:
        return _DERIVE_NAMES[self]

    @classmethod
    def from_derive(cls, name: str) -> "GenerationKind | None":
        for kind, derive in _DERIVE_NAMES.items():
            if derive == name:
                return kind
        return None


_DERIVE_NAMES = {
    GenerationKind.CONSTRUCTOR: "Constructor",
    GenerationKind.GETTERS: "Getters",
    GenerationKind.SETTERS: "Setters",
}


class RecordTypeDefinition(_Frozen):
    name: str
    shape: RecordShape = RecordShape.NAMED
    fields: list[FieldDefinition] = []
    requests: frozenset[GenerationKind] = frozenset()
    line: int | None = None

    @property
    def is_named_record(self) -> bool:
        return self.shape is RecordShape.NAMED


class Directive(StrEnum):
    DEFAULT = "default"
    SKIP = "skip"
    COPY = "copy"
    AS_SLICE = "as_slice"


@dataclass(frozen=True)
class DirectiveFlags:
    default: bool = False
    skip: bool = False
    copy: bool = False
    as_slice: bool = False

    def __contains__(self, directive: Directive) -> bool:
        return bool(getattr(self, directive.value))


class Parameter(_Frozen):
    name: str
    ty: TypeDescriptor


class Receiver(StrEnum):
    NONE = "none"
    SHARED = "shared"
    EXCLUSIVE = "exclusive"


class FieldInitializer(_Frozen):
    member: str
    value: str

    @property
    def shorthand(self) -> bool:
        return self.member == self.value


class StructLiteral(_Frozen):
    type_name: str
    initializers: list[FieldInitializer] = []


class FunctionBody(_Frozen):
    statements: list[str] = []
    tail: str | StructLiteral | None = None


class GeneratedFunction(_Frozen):
    name: str
    public: bool = True
    receiver: Receiver = Receiver.NONE
    parameters: list[Parameter] = []
    return_type: TypeDescriptor | None = None
    body: FunctionBody = FunctionBody()


class GeneratedFragment(_Frozen):
    type_name: str
    kind: GenerationKind
    functions: list[GeneratedFunction] = []

    @property
    def is_empty(self) -> bool:
        return not self.functions

    def function_names(self) -> list[str]:
        return [fn.name for fn in self.functions]
