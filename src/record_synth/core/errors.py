from collections.abc import Iterable
from dataclasses import dataclass

from record_synth.models import TypeDescriptor


@dataclass(frozen=True)
class Diagnostic:
    message: str
    record: str | None = None
    field: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        location = ".".join(part for part in (self.record, self.field) if part)
        if self.line is not None:
            location = f"{location} (line {self.line})" if location else f"line {self.line}"
        return f"{location}: {self.message}" if location else self.message


class GenerationError(Exception):
    """Generation aborted; carries every diagnostic gathered before giving up."""

    def __init__(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(str(d) for d in self.diagnostics))


class TypeArgumentError(GenerationError):
    def __init__(self, message: str, ty: TypeDescriptor) -> None:
        self.ty = ty
        super().__init__([Diagnostic(message=f"{message}, found `{ty.text}`")])

    @property
    def message(self) -> str:
        return self.diagnostics[0].message


class SourceParseError(GenerationError):
    pass
