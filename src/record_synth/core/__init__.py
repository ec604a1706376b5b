from record_synth.core.accessors import synthesize_getters
from record_synth.core.constructor import synthesize_constructor, to_parameter
from record_synth.core.directives import has_directive, resolve_directives, scan_directives
from record_synth.core.errors import Diagnostic, GenerationError, SourceParseError, TypeArgumentError
from record_synth.core.generate import (
    GenerationResult,
    generate_from_file,
    generate_from_records,
    generate_from_source,
    synthesize,
)
from record_synth.core.mutators import synthesize_setters
from record_synth.core.parser import parse_records, parse_type
from record_synth.core.render import render_fragment, render_function
from record_synth.core.type_args import extract_single_argument, reference_to, slice_of

__all__ = [
    "Diagnostic",
    "GenerationError",
    "GenerationResult",
    "SourceParseError",
    "TypeArgumentError",
    "extract_single_argument",
    "generate_from_file",
    "generate_from_records",
    "generate_from_source",
    "has_directive",
    "parse_records",
    "parse_type",
    "reference_to",
    "render_fragment",
    "render_function",
    "resolve_directives",
    "scan_directives",
    "slice_of",
    "synthesize",
    "synthesize_constructor",
    "synthesize_getters",
    "synthesize_setters",
    "to_parameter",
]
