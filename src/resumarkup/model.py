"""Document model produced by the ResuMarkup compiler.

- Configuration: document-wide style settings, resolved before any block is built
- Block variants: one typed, styled unit of output each
- Document: the resolved configuration plus the ordered blocks
"""

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple

# Hard-coded style defaults used when no directive overrides them
DEFAULT_TITLE_SIZE = 28
DEFAULT_SUBTITLE_SIZE = 18
DEFAULT_ITEM_SIZE = 16
DEFAULT_SECTION_SIZE = 18
DEFAULT_BODY_SIZE = 15
DEFAULT_MARGINS = 20
DEFAULT_FONT_PATH = '/usr/share/fonts/vollkorn'
DEFAULT_FONT_NAME = 'Vollkorn'

DEFAULT_BREAK_SIZE = 1.0
BULLET_MARKER = '-'


@dataclass(frozen=True)
class Configuration:
    title_size: int = DEFAULT_TITLE_SIZE
    subtitle_size: int = DEFAULT_SUBTITLE_SIZE
    item_size: int = DEFAULT_ITEM_SIZE
    section_size: int = DEFAULT_SECTION_SIZE
    default_size: int = DEFAULT_BODY_SIZE
    margins: int = DEFAULT_MARGINS
    font_path: str = DEFAULT_FONT_PATH
    font_name: str = DEFAULT_FONT_NAME

    def to_ir(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Block:
    """Base for all block variants; ``kind`` tags the variant in the IR."""

    kind: ClassVar[str] = 'block'

    def to_ir(self) -> Dict[str, Any]:
        d = {'kind': self.kind}
        d.update(asdict(self))
        return d


@dataclass(frozen=True)
class TitleText(Block):
    kind: ClassVar[str] = 'title'
    text: str
    size: int
    bold: bool = True
    align: str = 'center'


@dataclass(frozen=True)
class InfoText(Block):
    kind: ClassVar[str] = 'info'
    text: str
    size: int
    align: str = 'center'


@dataclass(frozen=True)
class SubtitleText(Block):
    kind: ClassVar[str] = 'subtitle'
    text: str
    size: int
    italic: bool = True
    align: str = 'center'


@dataclass(frozen=True)
class BulletPoint(Block):
    kind: ClassVar[str] = 'bullet'
    text: str
    marker: str = BULLET_MARKER


@dataclass(frozen=True)
class ExperienceHeader(Block):
    kind: ClassVar[str] = 'experience'
    text: str
    size: int
    align: str = 'left'


@dataclass(frozen=True)
class SpecializationText(Block):
    kind: ClassVar[str] = 'specialization'
    text: str
    italic: bool = True
    indent: int = 2


@dataclass(frozen=True)
class DateRange(Block):
    kind: ClassVar[str] = 'date_range'
    text: str
    indent: int = 1

    @classmethod
    def between(cls, start: str, end: Optional[str] = None) -> 'DateRange':
        """Build ``"<start> - <end>"``; an open range ends in ``Present``."""
        return cls(text=f"{start} - {end if end is not None else 'Present'}")


@dataclass(frozen=True)
class SectionHeader(Block):
    kind: ClassVar[str] = 'section_header'
    text: str
    size: int
    bold: bool = True
    align: str = 'left'


@dataclass(frozen=True)
class SectionDivider(Block):
    kind: ClassVar[str] = 'section_divider'
    text: str
    size: int
    bold: bool = True
    align: str = 'center'

    @classmethod
    def of_length(cls, length: int, size: int) -> 'SectionDivider':
        return cls(text='-' * length, size=size)


@dataclass(frozen=True)
class LineBreak(Block):
    kind: ClassVar[str] = 'break'
    size: float = DEFAULT_BREAK_SIZE


@dataclass(frozen=True)
class Document:
    configuration: Configuration = field(default_factory=Configuration)
    blocks: Tuple[Block, ...] = ()

    def to_ir(self) -> Dict[str, Any]:
        return {
            'configuration': self.configuration.to_ir(),
            'blocks': [b.to_ir() for b in self.blocks],
        }
