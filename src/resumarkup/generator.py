"""Typst rendering of a compiled ResuMarkup document.

Each block becomes one top-level Typst statement; blocks are separated by
blank lines so every block starts a paragraph of its own.
"""

from typing import Callable, Dict, List, Optional

from .model import (
    Block,
    BulletPoint,
    DateRange,
    Document,
    ExperienceHeader,
    InfoText,
    LineBreak,
    SectionDivider,
    SectionHeader,
    SpecializationText,
    SubtitleText,
    TitleText,
)
from .utils.typst_helpers import (
    build_document_setup,
    build_text_args,
    build_text_call,
    build_typst_comment,
    format_number,
    typst_string,
)

DOCUMENT_TITLE = 'Resume'

BACKGROUND = 'rgb("#ffffff")'
# One indent step: glyphs drawn in the background colour
SPACER = 'mm'


def _style_args(size=None, bold=False, italic=False, fill=None) -> str:
    return build_text_args(
        size=size,
        weight='bold' if bold else None,
        style='italic' if italic else None,
        fill=fill,
    )


def _aligned(text: str, align: str, size=None, bold=False, italic=False) -> str:
    call = build_text_call(text, _style_args(size=size, bold=bold, italic=italic))
    return f"#align({align}, {call})"


def _indented(text: str, indent: int, size=None, bold=False, italic=False) -> str:
    """Prefix text with invisible spacer glyphs, one SPACER per indent step."""
    parts = []
    if indent > 0:
        parts.append('#' + build_text_call(SPACER * indent, _style_args(size=size, fill=BACKGROUND)))
    parts.append('#' + build_text_call(text, _style_args(size=size, bold=bold, italic=italic)))
    return ''.join(parts)


def render_title(block: TitleText) -> str:
    return _aligned(block.text, block.align, size=block.size, bold=block.bold)


def render_info(block: InfoText) -> str:
    return _aligned(block.text, block.align, size=block.size)


def render_subtitle(block: SubtitleText) -> str:
    return _aligned(block.text, block.align, size=block.size, italic=block.italic)


def render_bullet(block: BulletPoint) -> str:
    return f"#list(marker: {typst_string(block.marker)}, {build_text_call(block.text)})"


def render_experience(block: ExperienceHeader) -> str:
    return _aligned(block.text, block.align, size=block.size)


def render_specialization(block: SpecializationText) -> str:
    return _indented(block.text, block.indent, italic=block.italic)


def render_date_range(block: DateRange) -> str:
    return _indented(block.text, block.indent)


def render_section_header(block: SectionHeader) -> str:
    return _aligned(block.text, block.align, size=block.size, bold=block.bold)


def render_section_divider(block: SectionDivider) -> str:
    return _aligned(block.text, block.align, size=block.size, bold=block.bold)


def render_break(block: LineBreak) -> str:
    return f"#v({format_number(block.size)}em)"


RENDERERS: Dict[type, Callable] = {
    TitleText: render_title,
    InfoText: render_info,
    SubtitleText: render_subtitle,
    BulletPoint: render_bullet,
    ExperienceHeader: render_experience,
    SpecializationText: render_specialization,
    DateRange: render_date_range,
    SectionHeader: render_section_header,
    SectionDivider: render_section_divider,
    LineBreak: render_break,
}


def render_block(block: Block) -> str:
    renderer = RENDERERS.get(type(block))
    if renderer is None:
        raise TypeError(f"No Typst renderer for block kind '{block.kind}'")
    return renderer(block)


def generate_typst(document: Document, family_name: Optional[str] = None) -> str:
    """Generate Typst source for a compiled document.

    family_name: font family to request; defaults to the document's FONTNAME.
    Pass the name declared by the loaded font files when it differs.
    """
    config = document.configuration
    out: List[str] = [
        build_typst_comment('Generated by resumarkup'),
        build_document_setup(
            DOCUMENT_TITLE,
            config.margins,
            font=family_name or config.font_name,
            size=config.default_size,
        ),
        '',
    ]
    for block in document.blocks:
        out.append(render_block(block))
        out.append('')
    return '\n'.join(out)
