from record_synth.models import (
    FunctionBody,
    GeneratedFragment,
    GeneratedFunction,
    Receiver,
    StructLiteral,
)

_RECEIVERS = {
    Receiver.NONE: None,
    Receiver.SHARED: "&self",
    Receiver.EXCLUSIVE: "&mut self",
}


def _render_struct_literal(literal: StructLiteral, pad: str, step: str) -> list[str]:
    if not literal.initializers:
        return [f"{pad}{literal.type_name} {{}}"]
    lines = [f"{pad}{literal.type_name} {{"]
    for init in literal.initializers:
        entry = init.member if init.shorthand else f"{init.member}: {init.value}"
        lines.append(f"{pad}{step}{entry},")
    lines.append(f"{pad}}}")
    return lines


def _render_body(body: FunctionBody, pad: str, step: str) -> list[str]:
    lines = [f"{pad}{statement}" for statement in body.statements]
    if isinstance(body.tail, StructLiteral):
        lines.extend(_render_struct_literal(body.tail, pad, step))
    elif body.tail is not None:
        lines.append(f"{pad}{body.tail}")
    return lines


def render_signature(function: GeneratedFunction) -> str:
    params = [_RECEIVERS[function.receiver]] + [f"{p.name}: {p.ty.text}" for p in function.parameters]
    signature = f"fn {function.name}({', '.join(p for p in params if p)})"
    if function.public:
        signature = f"pub {signature}"
    if function.return_type is not None:
        signature = f"{signature} -> {function.return_type.text}"
    return signature


def render_function(function: GeneratedFunction, indent: int = 4, level: int = 0) -> str:
    step = " " * indent
    pad = step * level
    lines = [f"{pad}{render_signature(function)} {{"]
    lines.extend(_render_body(function.body, pad + step, step))
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def render_fragment(fragment: GeneratedFragment, indent: int = 4) -> str:
    """Render a fragment as an ``impl`` block; empty fragments give ``impl Name {}``."""
    if fragment.is_empty:
        return f"impl {fragment.type_name} {{}}\n"
    functions = "\n\n".join(render_function(fn, indent=indent, level=1) for fn in fragment.functions)
    return f"impl {fragment.type_name} {{\n{functions}\n}}\n"
