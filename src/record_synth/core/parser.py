"""Rust front-end: turn source text into record definitions with tree-sitter."""

import logging
import re
from collections.abc import Iterator

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from record_synth.core.errors import Diagnostic, SourceParseError
from record_synth.models import (
    Attribute,
    FieldDefinition,
    GenerationKind,
    MetaItem,
    PathSegment,
    RecordShape,
    RecordTypeDefinition,
    TypeDescriptor,
    TypeKind,
    Visibility,
)

logger = logging.getLogger(__name__)

_LEADING_IDENT_RE = re.compile(r"""(r#)?[A-Za-z_][A-Za-z0-9_]*(?!['"#A-Za-z0-9_])""")
_COMMENT_TYPES = frozenset({"line_comment", "block_comment"})
_RECORD_SHAPES = {
    "struct_item": RecordShape.NAMED,
    "union_item": RecordShape.UNION,
    "enum_item": RecordShape.ENUM,
}
_PATH_TYPES = frozenset(
    {"type_identifier", "primitive_type", "scoped_type_identifier", "generic_type", "identifier", "scoped_identifier"}
)


def _rust_parser() -> Parser:
    return get_parser("rust")


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def _squash(text: str) -> str:
    return " ".join(text.split())


def _first_error(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _check_errors(root: Node) -> None:
    if not root.has_error:
        return
    error = _first_error(root) or root
    line = error.start_point[0] + 1
    raise SourceParseError([Diagnostic(message=f"syntax error near `{_squash(_text(error))[:40]}`", line=line)])


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


def _path_segments(node: Node) -> list[PathSegment]:
    if node.type == "generic_type":
        base = node.child_by_field_name("type")
        segments = _path_segments(base) if base is not None else []
        args_node = node.child_by_field_name("type_arguments")
        arguments = [_type_from_node(arg) for arg in args_node.named_children] if args_node is not None else []
        if segments:
            last = segments[-1]
            segments[-1] = PathSegment(name=last.name, arguments=arguments)
        return segments
    if node.type in ("scoped_type_identifier", "scoped_identifier"):
        path = node.child_by_field_name("path")
        name = node.child_by_field_name("name")
        segments = _path_segments(path) if path is not None else []
        if name is not None:
            segments.append(PathSegment(name=_text(name)))
        return segments
    return [PathSegment(name=_text(node))]


def _render_path(segments: list[PathSegment], leading: str = "") -> str:
    parts = []
    for segment in segments:
        if segment.arguments is None:
            parts.append(segment.name)
        else:
            parts.append(f"{segment.name}<{', '.join(arg.text for arg in segment.arguments)}>")
    return leading + "::".join(parts)


def _type_from_node(node: Node) -> TypeDescriptor:
    if node.type in _PATH_TYPES:
        segments = _path_segments(node)
        leading = "::" if _text(node).startswith("::") else ""
        return TypeDescriptor(kind=TypeKind.PATH, text=_render_path(segments, leading), segments=segments)

    if node.type == "reference_type":
        inner_node = node.child_by_field_name("type")
        inner = _type_from_node(inner_node) if inner_node is not None else None
        mutable = any(child.type == "mutable_specifier" for child in node.children)
        lifetime = next((_text(child) + " " for child in node.children if child.type == "lifetime"), "")
        inner_text = inner.text if inner is not None else ""
        text = f"&{lifetime}{'mut ' if mutable else ''}{inner_text}"
        return TypeDescriptor(kind=TypeKind.REFERENCE, text=text, element=inner, mutable=mutable)

    if node.type == "array_type":
        element_node = node.child_by_field_name("element")
        element = _type_from_node(element_node) if element_node is not None else None
        length = node.child_by_field_name("length")
        element_text = element.text if element is not None else ""
        if length is None:
            return TypeDescriptor(kind=TypeKind.SLICE, text=f"[{element_text}]", element=element)
        return TypeDescriptor(kind=TypeKind.ARRAY, text=f"[{element_text}; {_squash(_text(length))}]", element=element)

    if node.type in ("tuple_type", "unit_type"):
        items = [_type_from_node(child) for child in node.named_children]
        inner = ", ".join(item.text for item in items)
        text = f"({inner},)" if len(items) == 1 else f"({inner})"
        return TypeDescriptor(kind=TypeKind.TUPLE, text=text)

    return TypeDescriptor(kind=TypeKind.OTHER, text=_squash(_text(node)))


def parse_type(text: str) -> TypeDescriptor:
    """Parse a standalone Rust type such as ``Vec<u8>`` into a descriptor."""
    tree = _rust_parser().parse(f"type __Parsed = {text};".encode())
    _check_errors(tree.root_node)
    type_item = tree.root_node.named_children[0]
    node = type_item.child_by_field_name("type")
    if node is None:
        raise SourceParseError([Diagnostic(message=f"not a type: `{text}`")])
    return _type_from_node(node)


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


def _meta_items(token_tree: Node) -> list[MetaItem]:
    """Split a parenthesised token tree on its top-level commas.

    Punctuation inside a token tree may not surface as child nodes, so the
    split works on the raw bytes and only skips spans covered by nested
    trees and literals.
    """
    raw = token_tree.text or b""
    offset = token_tree.start_byte
    covered = [(child.start_byte - offset, child.end_byte - offset) for child in token_tree.named_children]
    cuts = [0]
    for index in range(1, len(raw) - 1):
        if raw[index : index + 1] == b"," and not any(start <= index < end for start, end in covered):
            cuts.append(index)
    cuts.append(len(raw) - 1)

    items = []
    for start, end in zip(cuts, cuts[1:], strict=False):
        text = _squash(raw[start + 1 : end].decode("utf-8"))
        if not text:
            continue
        match = _LEADING_IDENT_RE.match(text)
        items.append(MetaItem(ident=match.group(0) if match else None, text=text))
    return items


def _attribute_from_node(node: Node) -> Attribute | None:
    attribute = next((child for child in node.named_children if child.type == "attribute"), None)
    if attribute is None or not attribute.named_children:
        return None
    path = _text(attribute.named_children[0])
    arguments = attribute.child_by_field_name("arguments") or next(
        (child for child in attribute.named_children if child.type == "token_tree"), None
    )
    items = None
    if arguments is not None and _text(arguments).startswith("("):
        items = _meta_items(arguments)
    return Attribute(path=path, items=items, text=_squash(_text(node)))


def _derive_requests(attributes: list[Attribute]) -> frozenset[GenerationKind]:
    requests = set()
    for attribute in attributes:
        if attribute.path != "derive" or attribute.items is None:
            continue
        for item in attribute.items:
            name = item.text.replace(" ", "").rsplit("::", 1)[-1]
            kind = GenerationKind.from_derive(name)
            if kind is not None:
                requests.add(kind)
    return frozenset(requests)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def _visibility(node: Node) -> Visibility:
    modifier = next((child for child in node.children if child.type == "visibility_modifier"), None)
    if modifier is not None and _text(modifier).strip() == "pub":
        return Visibility.PUBLIC
    return Visibility.NON_PUBLIC


def _fields_from_list(body: Node) -> list[FieldDefinition]:
    fields: list[FieldDefinition] = []
    pending: list[Attribute] = []
    for child in body.named_children:
        if child.type in _COMMENT_TYPES:
            continue
        if child.type == "attribute_item":
            attribute = _attribute_from_node(child)
            if attribute is not None:
                pending.append(attribute)
            continue
        if child.type == "field_declaration":
            name = child.child_by_field_name("name")
            ty = child.child_by_field_name("type")
            if name is None or ty is None:
                continue
            fields.append(
                FieldDefinition(
                    name=_text(name),
                    ty=_type_from_node(ty),
                    visibility=_visibility(child),
                    attributes=pending,
                    line=child.start_point[0] + 1,
                )
            )
        pending = []
    return fields


def _record_from_node(node: Node, attributes: list[Attribute]) -> RecordTypeDefinition | None:
    name = node.child_by_field_name("name")
    if name is None:
        return None
    shape = _RECORD_SHAPES[node.type]
    body = node.child_by_field_name("body")
    fields: list[FieldDefinition] = []
    if node.type == "struct_item":
        if body is None:
            shape = RecordShape.UNIT
        elif body.type == "ordered_field_declaration_list":
            shape = RecordShape.TUPLE
        else:
            fields = _fields_from_list(body)
    return RecordTypeDefinition(
        name=_text(name),
        shape=shape,
        fields=fields if shape is RecordShape.NAMED else [],
        requests=_derive_requests(attributes),
        line=node.start_point[0] + 1,
    )


def _collect_records(container: Node) -> Iterator[RecordTypeDefinition]:
    pending: list[Attribute] = []
    for child in container.named_children:
        if child.type in _COMMENT_TYPES:
            continue
        if child.type == "attribute_item":
            attribute = _attribute_from_node(child)
            if attribute is not None:
                pending.append(attribute)
            continue
        if child.type in _RECORD_SHAPES:
            record = _record_from_node(child, pending)
            if record is not None:
                yield record
        elif child.type == "mod_item":
            body = child.child_by_field_name("body")
            if body is not None:
                yield from _collect_records(body)
        pending = []


def parse_records(source: str | bytes) -> list[RecordTypeDefinition]:
    """Parse Rust source and return every struct, enum and union in source order."""
    source_bytes = source.encode("utf-8") if isinstance(source, str) else source
    tree = _rust_parser().parse(source_bytes)
    _check_errors(tree.root_node)
    records = list(_collect_records(tree.root_node))
    logger.debug("Parsed %d record(s)", len(records))
    return records
