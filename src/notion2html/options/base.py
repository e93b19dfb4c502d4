#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/options/base.py
"""Base classes for renderer options."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated; ``__post_init__``
            validation runs again on the copy

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses define format-specific options as frozen dataclass fields
    carrying ``help`` and ``importance`` metadata.

    """

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""
