import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from record_synth.core.accessors import synthesize_getters
from record_synth.core.constructor import synthesize_constructor
from record_synth.core.directives import resolve_directives
from record_synth.core.errors import Diagnostic, GenerationError
from record_synth.core.mutators import synthesize_setters
from record_synth.core.parser import parse_records
from record_synth.core.render import render_fragment
from record_synth.models import DirectiveFlags, GeneratedFragment, GenerationKind, RecordTypeDefinition

logger = logging.getLogger(__name__)

Synthesizer = Callable[[RecordTypeDefinition, Sequence[DirectiveFlags] | None], GeneratedFragment]

_SYNTHESIZERS: dict[GenerationKind, Synthesizer] = {
    GenerationKind.CONSTRUCTOR: synthesize_constructor,
    GenerationKind.GETTERS: synthesize_getters,
    GenerationKind.SETTERS: synthesize_setters,
}

# Emission order when several generations are requested on one type.
_ORDER = (GenerationKind.CONSTRUCTOR, GenerationKind.GETTERS, GenerationKind.SETTERS)


@dataclass
class GenerationResult:
    records: list[RecordTypeDefinition] = field(default_factory=list)
    fragments: list[GeneratedFragment] = field(default_factory=list)

    def render(self, indent: int = 4) -> str:
        return "\n".join(render_fragment(fragment, indent=indent) for fragment in self.fragments)


def synthesize(
    record: RecordTypeDefinition,
    kinds: Iterable[GenerationKind] | None = None,
) -> list[GeneratedFragment]:
    """Run the requested synthesizers on one record, sharing its directive flags."""
    requested = set(record.requests if kinds is None else kinds)
    if not requested:
        return []
    directives = resolve_directives(record)
    fragments = [_SYNTHESIZERS[kind](record, directives) for kind in _ORDER if kind in requested]
    logger.info(
        "Generated %d function(s) for %s (%s)",
        sum(len(f.functions) for f in fragments),
        record.name,
        ", ".join(f.kind.value for f in fragments),
    )
    return fragments


def generate_from_records(
    records: Sequence[RecordTypeDefinition],
    kinds: Iterable[GenerationKind] | None = None,
) -> GenerationResult:
    """Synthesize every record, failing with all diagnostics at once if any record fails."""
    forced = None if kinds is None else list(kinds)
    result = GenerationResult(records=list(records))
    diagnostics: list[Diagnostic] = []
    for record in records:
        try:
            result.fragments.extend(synthesize(record, forced))
        except GenerationError as exc:
            diagnostics.extend(exc.diagnostics)
    if diagnostics:
        raise GenerationError(diagnostics)
    return result


def generate_from_source(source: str | bytes, kinds: Iterable[GenerationKind] | None = None) -> GenerationResult:
    return generate_from_records(parse_records(source), kinds)


def generate_from_file(path: str | Path, kinds: Iterable[GenerationKind] | None = None) -> GenerationResult:
    file_path = Path(path)
    try:
        source_bytes = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    return generate_from_source(source_bytes, kinds)
