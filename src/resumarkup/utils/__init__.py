"""Shared utilities for resumarkup.

- typst_helpers: Typst code generation helpers
"""

from .typst_helpers import (
    build_document_setup,
    build_text_args,
    build_text_call,
    build_typst_comment,
    escape_typst_string,
    format_number,
    typst_string,
)

__all__ = [
    'build_document_setup',
    'build_text_args',
    'build_text_call',
    'build_typst_comment',
    'escape_typst_string',
    'format_number',
    'typst_string',
]
