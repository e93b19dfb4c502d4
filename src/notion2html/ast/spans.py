#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/ast/spans.py
"""Inline rich-text model.

A block's body text is a sequence of :class:`TextSpan` objects. Each span is a
run of plain text plus an ordered tuple of :class:`Attribute` values. The
attributes are kept in declaration order; the renderer walks them in reverse,
so the first-declared attribute wraps the text most tightly and
``[bold, link]`` renders as ``<a href="..."><strong>text</strong></a>``.

Attribute Kinds
---------------
Flags (no payload):
    bold, italic, strikethrough, code

Payload attributes:
    link (URI), user (user id), comment (comment id), page (page id),
    highlight (color name), date (:class:`Date`)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Union


class AttrType(str, Enum):
    """Attribute kinds, valued by their single-letter wire code."""

    BOLD = "b"
    ITALIC = "i"
    STRIKETHROUGH = "s"
    CODE = "c"
    LINK = "a"
    USER = "u"
    COMMENT = "m"
    DATE = "d"
    PAGE = "p"
    HIGHLIGHT = "h"


FLAG_ATTRS = frozenset({AttrType.BOLD, AttrType.ITALIC, AttrType.STRIKETHROUGH, AttrType.CODE})
STRING_ATTRS = frozenset({AttrType.LINK, AttrType.USER, AttrType.COMMENT, AttrType.PAGE, AttrType.HIGHLIGHT})


@dataclass(frozen=True)
class Date:
    """A date or date range attached to a ``d`` attribute.

    Parameters
    ----------
    start_date : str
        ISO date, e.g. ``"2019-03-26"``
    start_time : str, default ""
        ``"HH:MM"`` time for datetime types
    end_date : str, default ""
        ISO end date for range types
    end_time : str, default ""
        ``"HH:MM"`` end time for datetime range types
    date_format : str, default ""
        Display format: ``"relative"``, ``"MMM DD, YYYY"``, ``"MM/DD/YYYY"``,
        ``"DD/MM/YYYY"``, ``"YYYY/MM/DD"`` or ``"YYYY-MM-DD"``
    time_format : str, default ""
        ``"H:mm"`` for a 24-hour clock, empty for 12-hour
    time_zone : str or None, default None
        IANA time zone name
    type : str, default "date"
        One of ``date``, ``datetime``, ``daterange``, ``datetimerange``

    """

    start_date: str = ""
    start_time: str = ""
    end_date: str = ""
    end_time: str = ""
    date_format: str = ""
    time_format: str = ""
    time_zone: Optional[str] = None
    type: str = "date"

    @property
    def is_range(self) -> bool:
        """Whether the date has an end component."""
        return "range" in self.type


AttrValue = Union[str, Date, None]


@dataclass(frozen=True)
class Attribute:
    """One inline markup instruction attached to a span.

    Parameters
    ----------
    type : AttrType
        Attribute kind
    value : str, Date or None, default None
        Payload; must be None for flags, a string for link/user/comment/page/
        highlight and a :class:`Date` for date attributes

    Raises
    ------
    TypeError
        If the payload does not match the attribute kind

    """

    type: AttrType
    value: AttrValue = None

    def __post_init__(self) -> None:
        """Check that the payload matches the attribute kind."""
        kind = AttrType(self.type)
        object.__setattr__(self, "type", kind)
        if kind in FLAG_ATTRS:
            if self.value is not None:
                raise TypeError(f"attribute '{kind.value}' takes no payload")
        elif kind in STRING_ATTRS:
            if not isinstance(self.value, str):
                raise TypeError(f"attribute '{kind.value}' requires a string payload, got {type(self.value).__name__}")
        elif not isinstance(self.value, Date):
            raise TypeError(f"attribute 'd' requires a Date payload, got {type(self.value).__name__}")

    @classmethod
    def bold(cls) -> Attribute:
        return cls(AttrType.BOLD)

    @classmethod
    def italic(cls) -> Attribute:
        return cls(AttrType.ITALIC)

    @classmethod
    def strikethrough(cls) -> Attribute:
        return cls(AttrType.STRIKETHROUGH)

    @classmethod
    def code(cls) -> Attribute:
        return cls(AttrType.CODE)

    @classmethod
    def link(cls, uri: str) -> Attribute:
        return cls(AttrType.LINK, uri)

    @classmethod
    def user(cls, user_id: str) -> Attribute:
        return cls(AttrType.USER, user_id)

    @classmethod
    def comment(cls, comment_id: str) -> Attribute:
        return cls(AttrType.COMMENT, comment_id)

    @classmethod
    def page(cls, page_id: str) -> Attribute:
        return cls(AttrType.PAGE, page_id)

    @classmethod
    def highlight(cls, color: str) -> Attribute:
        return cls(AttrType.HIGHLIGHT, color)

    @classmethod
    def date(cls, date: Date) -> Attribute:
        return cls(AttrType.DATE, date)


@dataclass(frozen=True)
class TextSpan:
    """A run of text with its attribute list.

    Parameters
    ----------
    text : str
        Visible text (``"‣"`` for user and date mentions)
    attrs : tuple of Attribute, default ()
        Attributes in declaration order

    """

    text: str
    attrs: tuple[Attribute, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.attrs, tuple):
            object.__setattr__(self, "attrs", tuple(self.attrs))

    @property
    def is_plain(self) -> bool:
        """True if no attribute changes the rendered markup.

        Comment references never produce markup, so a span carrying only
        comments is still plain.
        """
        return all(attr.type is AttrType.COMMENT for attr in self.attrs)

    def get(self, attr_type: AttrType) -> Optional[Attribute]:
        """Return the last attribute of the given kind, if any."""
        for attr in reversed(self.attrs):
            if attr.type is attr_type:
                return attr
        return None


def text_spans_to_string(spans: Iterable[TextSpan]) -> str:
    """Concatenate the plain text of spans, ignoring attributes."""
    return "".join(span.text for span in spans)
