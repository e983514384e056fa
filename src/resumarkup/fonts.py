"""Font family loading for the renderer.

A family is four TrueType files in one directory, named
``<name>-Regular.ttf``, ``<name>-Bold.ttf``, ``<name>-Italic.ttf`` and
``<name>-BoldItalic.ttf``. Each file is opened with fontTools to make sure
it is a usable font and to read the family name it declares.
"""

import pathlib
import warnings
from dataclasses import dataclass
from typing import Optional

from fontTools.ttLib import TTFont

from .errors import UnloadableFont

FONT_STYLES = ('Regular', 'Bold', 'Italic', 'BoldItalic')


@dataclass(frozen=True)
class FontFamily:
    name: str
    directory: pathlib.Path
    regular: pathlib.Path
    bold: pathlib.Path
    italic: pathlib.Path
    bold_italic: pathlib.Path
    # Family name declared in the regular face's name table
    family_name: str


def font_file_path(font_dir, font_name: str, style: str) -> pathlib.Path:
    return pathlib.Path(font_dir) / f"{font_name}-{style}.ttf"


def _read_family_name(path: pathlib.Path) -> Optional[str]:
    """Open a font with fontTools and return its typographic/family name."""
    try:
        font = TTFont(str(path), lazy=True)
        try:
            table = font.get('name')
            if not table:
                return None
            # Typographic family (16) takes precedence over legacy family (1)
            for name_id in (16, 1):
                rec = table.getDebugName(name_id)
                if rec:
                    return rec.strip()
            return None
        finally:
            font.close()
    except Exception as e:
        raise UnloadableFont(path, str(e)) from e


def load_font_family(font_dir, font_name: str) -> FontFamily:
    directory = pathlib.Path(font_dir)
    if not directory.is_dir():
        raise UnloadableFont(directory, 'font directory not found')
    files = {}
    for style in FONT_STYLES:
        path = font_file_path(directory, font_name, style)
        if not path.is_file():
            raise UnloadableFont(path, 'font file not found')
        files[style] = path
    declared = None
    for style in FONT_STYLES:
        name = _read_family_name(files[style])
        if style == 'Regular':
            declared = name
    family_name = declared or font_name
    if family_name != font_name:
        warnings.warn(
            f"Font files for '{font_name}' declare family '{family_name}'; using '{family_name}'",
            UserWarning,
        )
    return FontFamily(
        name=font_name,
        directory=directory,
        regular=files['Regular'],
        bold=files['Bold'],
        italic=files['Italic'],
        bold_italic=files['BoldItalic'],
        family_name=family_name,
    )


def load_configured_font(config) -> FontFamily:
    """Load the family named by a document's FONTPATH/FONTNAME settings."""
    return load_font_family(config.font_path, config.font_name)
