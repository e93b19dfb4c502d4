#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/ids.py
"""Helpers for the two spellings of block/page identifiers.

Identifiers are 32 hex digits, written either plain
(``3b617da409454a52bc3a920ba8832bf7``) or dashed in 8-4-4-4-12 groups.
Lookups always normalize to the dashed form.
"""

from __future__ import annotations

import re

_NO_DASH_ID_RE = re.compile(r"^[0-9a-fA-F]{32}$")


def is_no_dash_id(value: str) -> bool:
    """Return True if ``value`` is a 32-digit hex id without dashes."""
    return bool(_NO_DASH_ID_RE.match(value))


def to_no_dash_id(value: str) -> str:
    """Strip dashes from an id."""
    return value.replace("-", "")


def to_dash_id(value: str) -> str:
    """Convert an id to its dashed form.

    Values that are not 32-digit hex ids (e.g. already dashed, or synthetic
    ids used in tests) are returned unchanged.

    Examples
    --------
        >>> to_dash_id("3b617da409454a52bc3a920ba8832bf7")
        '3b617da4-0945-4a52-bc3a-920ba8832bf7'

    """
    if not is_no_dash_id(value):
        return value
    return f"{value[0:8]}-{value[8:12]}-{value[12:16]}-{value[16:20]}-{value[20:32]}"
