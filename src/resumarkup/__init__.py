from .parser import (
    compile_source as compile_source,
    parse_resume as parse_resume,
    parse_directive as parse_directive,
    scan_configuration as scan_configuration,
    build_blocks as build_blocks,
    read_lines as read_lines,
    LineCursor as LineCursor,
    Directive as Directive,
)
from .model import (
    Configuration as Configuration,
    Document as Document,
    Block as Block,
    TitleText as TitleText,
    InfoText as InfoText,
    SubtitleText as SubtitleText,
    BulletPoint as BulletPoint,
    ExperienceHeader as ExperienceHeader,
    SpecializationText as SpecializationText,
    DateRange as DateRange,
    SectionHeader as SectionHeader,
    SectionDivider as SectionDivider,
    LineBreak as LineBreak,
)
from .errors import (
    ResuMarkupError as ResuMarkupError,
    MissingInputPath as MissingInputPath,
    UnreadableSourceFile as UnreadableSourceFile,
    MalformedDirective as MalformedDirective,
    InvalidNumericValue as InvalidNumericValue,
    UnloadableFont as UnloadableFont,
)
from .generator import generate_typst as generate_typst
from .fonts import (
    FontFamily as FontFamily,
    load_font_family as load_font_family,
)
