"""
textkit Package.

Small, stateless string-processing helpers: substring removal, word
frequency counting, deduplication, SEO slugs, phone number format checks
and human-readable byte sizes.
"""

import logging

from .core import LoggingConfig, setup_logging
from .utils import (
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

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LoggingConfig",
    "setup_logging",
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
