"""Typst code generation utilities."""

from typing import Optional, Union

Number = Union[int, float]


def escape_typst_string(text: str) -> str:
    """Escape text for use inside a Typst string literal.

    Rendering text as string literals instead of markup keeps shorthands
    like ``--``, ``*`` and ``_`` from being interpreted.
    """
    if not text:
        return ""

    # Escape backslashes first
    escaped = text.replace('\\', '\\\\')
    escaped = escaped.replace('"', '\\"')
    escaped = escaped.replace('\t', '\\t')
    escaped = escaped.replace('\r', '')
    return escaped


def typst_string(text: str) -> str:
    return f'"{escape_typst_string(text)}"'


def format_number(value: Number) -> str:
    """Format a number without a trailing ``.0`` for whole floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_text_args(
    font: Optional[str] = None,
    size: Optional[Number] = None,
    weight: Optional[str] = None,
    style: Optional[str] = None,
    fill: Optional[str] = None,
) -> str:
    """Build Typst text function arguments string.

    Returns formatted argument string like: font: "Vollkorn", size: 12pt, weight: "bold"
    """
    args = []

    if font:
        args.append(f'font: {typst_string(font)}')

    if size is not None:
        args.append(f'size: {format_number(size)}pt')

    if weight:
        args.append(f'weight: "{weight}"')

    if style:
        args.append(f'style: "{style}"')

    if fill:
        args.append(f'fill: {fill}')

    return ', '.join(args)


def build_text_call(text: str, text_args: str = '') -> str:
    """Build a ``text(...)`` call (code mode) whose body is a string literal."""
    if text_args:
        return f"text({text_args}, {typst_string(text)})"
    return f"text({typst_string(text)})"


def build_typst_comment(text: str) -> str:
    """Build Typst comment line."""
    return f"// {text}"


def build_document_setup(
    title: str,
    margins_mm: Number,
    font: Optional[str] = None,
    size: Optional[Number] = None,
) -> str:
    """Build the document, page and default text set rules."""
    lines = [
        f'#set document(title: {typst_string(title)})',
        f'#set page(margin: {format_number(margins_mm)}mm)',
    ]
    text_args = build_text_args(font=font, size=size)
    if text_args:
        lines.append(f'#set text({text_args})')
    return '\n'.join(lines)
