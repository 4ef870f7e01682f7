"""
Shared utilities for QuillCV.

Common functionality used across contexts:
- Logger setup
- Plain-text helpers
- Timestamps
"""

from quillcv.utils.text_processing import non_empty, single_line, strip_scheme, trim_join
from quillcv.utils.timestamp import now, today

__all__ = ["non_empty", "single_line", "strip_scheme", "trim_join", "now", "today"]
