"""Input Sanitizer: strips unsafe markup from free-text form fields.

Invariants:
    - Never raises; non-string input degrades to ""
    - Script blocks removed before generic tags, so script bodies never survive
    - Result is trimmed (empty result is rejected later by required-field rules)
"""

import re

_SCRIPT_BLOCK = re.compile(
    r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE,
)
_HTML_TAG = re.compile(r"<[^>]+>")


def sanitize_input(value: object) -> str:
    """Remove script blocks and HTML tags, then trim."""
    if not isinstance(value, str):
        return ""
    value = _SCRIPT_BLOCK.sub("", value)
    value = _HTML_TAG.sub("", value)
    return value.strip()
