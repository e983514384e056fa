"""Error kinds raised while compiling a ResuMarkup document.

Every error is fatal: compilation stops and no document is returned.
"""

from typing import Optional


class ResuMarkupError(Exception):
    """Base class for all compilation failures."""


class MissingInputPath(ResuMarkupError):
    def __init__(self):
        super().__init__("Please input a ResuMarkup file")


class UnreadableSourceFile(ResuMarkupError):
    def __init__(self, path, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Cannot open file '{self.path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedDirective(ResuMarkupError):
    """A line starts with ``#+`` but has no ``:`` separator."""

    def __init__(self, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"Line starts with #+ but does not have ':'{where}: {line!r}")


class InvalidNumericValue(ResuMarkupError):
    """A size, margin or dash-count directive whose value does not parse.

    Attributes:
        directive: Directive key without the ``#+`` sentinel, e.g. ``ENDSECTION``
        value: The raw (trimmed) value that failed to parse
    """

    def __init__(self, directive: str, value: str = ""):
        self.directive = directive
        self.value = value
        super().__init__(f"Incorrect #+{directive}: {value!r}")


class UnloadableFont(ResuMarkupError):
    def __init__(self, path, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to load font '{self.path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
