"""
Utility module providing the text helpers.

Depends only on the core module.
"""

from .text_utils import (
    remove,
    remove_all,
    words,
    word_frequency,
    dedupe,
    make_seo_name,
    is_phone,
    byte_format,
    byte_format_with_suffix
)

__all__ = [
    "remove",
    "remove_all",
    "words",
    "word_frequency",
    "dedupe",
    "make_seo_name",
    "is_phone",
    "byte_format",
    "byte_format_with_suffix"
]
