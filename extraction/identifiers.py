"""
extraction/identifiers.py — content-addressed misconception ids.

id = <prefix>-<checksum>
  prefix   : lower-cased text reduced to [a-z0-9], first 30 characters
  checksum : sum of the UTF-16 code units of the text as given, hex

The id is also the file stem of the generated image (<id>.png), so the
checksum sums UTF-16 code units rather than code points: ids of assets
already generated depend on it.
"""

from __future__ import annotations

import re

PREFIX_LENGTH = 30
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def _utf16_sum(text: str) -> int:
    data = text.encode("utf-16-le", errors="surrogatepass")
    return sum(int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2))


def generate_id(text: str) -> str:
    """Deterministic, readable id of a misconception text."""
    prefix = _NON_ALNUM_RE.sub("", text.lower())[:PREFIX_LENGTH]
    return f"{prefix}-{_utf16_sum(text):x}"
