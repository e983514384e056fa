import math
import re
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidNumericValue, MalformedDirective, UnreadableSourceFile
from .model import (
    DEFAULT_BREAK_SIZE,
    Block,
    BulletPoint,
    Configuration,
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

SENTINEL = '#+'
END_PREFIX = '#+END:'

# INFO values may spell a literal colon with this placeholder
INFO_COLON_PLACEHOLDER = '¦'

UINT_RE = re.compile(r'^\+?[0-9]+$')
SMALL_UINT_MAX = 255


class Directive(NamedTuple):
    key: str
    value: str


def read_lines(text: str) -> List[str]:
    """Split raw text on newlines; lines keep everything but the newline itself."""
    return text.split('\n')


def _split_once(line: str) -> Optional[Tuple[str, str]]:
    if ':' not in line:
        return None
    head, value = line.split(':', 1)
    return head.strip(), value.strip()


def parse_directive(line: str, line_number: Optional[int] = None) -> Optional[Directive]:
    """Parse ``#+KEY: VALUE`` into a Directive.

    Lines not starting with the sentinel return None. A sentinel line without a
    colon raises MalformedDirective. The key keeps any whitespace that followed
    the sentinel, so ``#+ AUTHOR`` does not match ``AUTHOR``.
    """
    if not line.startswith(SENTINEL):
        return None
    parts = _split_once(line)
    if parts is None:
        raise MalformedDirective(line, line_number)
    head, value = parts
    return Directive(head[len(SENTINEL):], value)


def parse_small_uint(directive: str, value: str) -> int:
    if not UINT_RE.match(value):
        raise InvalidNumericValue(directive, value)
    n = int(value)
    if n > SMALL_UINT_MAX:
        raise InvalidNumericValue(directive, value)
    return n


def parse_uint(directive: str, value: str) -> int:
    if not UINT_RE.match(value):
        raise InvalidNumericValue(directive, value)
    return int(value)


def parse_break_size(value: str) -> float:
    """Spacing for BREAK; anything unparsable falls back to the default."""
    try:
        size = float(value)
    except ValueError:
        return DEFAULT_BREAK_SIZE
    if not math.isfinite(size):
        return DEFAULT_BREAK_SIZE
    return size


def _as_str(directive: str, value: str) -> str:
    return value


# Directive key -> (Configuration field, value parser)
CONFIG_DIRECTIVES: Dict[str, Tuple[str, Callable[[str, str], object]]] = {
    'TITLESIZE': ('title_size', parse_small_uint),
    'SUBTITLESIZE': ('subtitle_size', parse_small_uint),
    'ITEMSIZE': ('item_size', parse_small_uint),
    'SECTIONSIZE': ('section_size', parse_small_uint),
    'DEFAULTSIZE': ('default_size', parse_small_uint),
    'MARGINS': ('margins', parse_small_uint),
    'FONTPATH': ('font_path', _as_str),
    'FONTNAME': ('font_name', _as_str),
}


def scan_configuration(lines: Sequence[str]) -> Configuration:
    """Resolve document-wide settings from configuration directives.

    The scan walks from the last line to the first and later assignments
    overwrite earlier ones, so on duplicate keys the topmost line in the
    file wins. Leading whitespace before the sentinel is tolerated here.
    """
    settings: Dict[str, object] = {}
    for line in reversed(lines):
        parts = _split_once(line)
        if parts is None:
            continue
        head, value = parts
        if not head.startswith(SENTINEL):
            continue
        entry = CONFIG_DIRECTIVES.get(head[len(SENTINEL):])
        if entry is None:
            continue
        field_name, convert = entry
        settings[field_name] = convert(head[len(SENTINEL):], value)
    return Configuration(**settings)


class LineCursor:
    """Indexed cursor over the pending lines with one-line push-back."""

    def __init__(self, lines: Sequence[str]):
        self._lines = tuple(lines)
        self._pos = 0

    @property
    def line_number(self) -> int:
        """1-based number of the line most recently returned by advance()."""
        return self._pos

    def has_next(self) -> bool:
        return self._pos < len(self._lines)

    def peek(self) -> Optional[str]:
        if not self.has_next():
            return None
        return self._lines[self._pos]

    def advance(self) -> str:
        if not self.has_next():
            raise IndexError('no more lines')
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def push_back(self) -> None:
        if self._pos == 0:
            raise IndexError('nothing to push back')
        self._pos -= 1


def _merge_date_range(start: str, cursor: LineCursor) -> DateRange:
    """Pair START with an immediately following ``#+END:`` line.

    The following line is consumed only when it is an END directive;
    otherwise it is pushed back and the range stays open.
    """
    if not cursor.has_next():
        return DateRange.between(start)
    nextline = cursor.advance()
    if nextline.startswith(END_PREFIX):
        _, end = _split_once(nextline)
        return DateRange.between(start, end)
    cursor.push_back()
    return DateRange.between(start)


def _build_block(directive: Directive, config: Configuration) -> Optional[Block]:
    key, value = directive
    if key == 'AUTHOR':
        return TitleText(value, size=config.title_size)
    if key == 'INFO':
        return InfoText(value.replace(INFO_COLON_PLACEHOLDER, ':'), size=config.default_size)
    if key == 'SUBTITLE':
        return SubtitleText(value, size=config.subtitle_size)
    if key == 'POINT':
        return BulletPoint(value)
    if key == 'EXPERIENCE':
        return ExperienceHeader(value, size=config.item_size)
    if key == 'SPECIALIZATION':
        return SpecializationText(value)
    if key == 'END':
        # Only reached when no START consumed this line
        return DateRange(value)
    if key == 'STARTSECTION':
        return SectionHeader(value, size=config.section_size)
    if key == 'ENDSECTION':
        return SectionDivider.of_length(parse_uint(key, value), size=config.title_size)
    if key in ('BREAK', ''):
        return LineBreak(parse_break_size(value))
    return None


def build_blocks(lines: Sequence[str], config: Configuration) -> List[Block]:
    """Single top-to-bottom pass turning directive lines into blocks."""
    blocks: List[Block] = []
    cursor = LineCursor(lines)
    while cursor.has_next():
        line = cursor.advance()
        directive = parse_directive(line, cursor.line_number)
        if directive is None:
            continue
        if directive.key == 'START':
            blocks.append(_merge_date_range(directive.value, cursor))
            continue
        block = _build_block(directive, config)
        if block is not None:
            blocks.append(block)
    return blocks


def compile_source(text: str) -> Document:
    lines = read_lines(text)
    config = scan_configuration(lines)
    return Document(configuration=config, blocks=tuple(build_blocks(lines, config)))


def parse_resume(path) -> Document:
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableSourceFile(path, str(e)) from e
    return compile_source(text)
