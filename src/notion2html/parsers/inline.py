#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/parsers/inline.py
"""Decoder for the compact rich-text token encoding.

The service stores rich text as nested JSON arrays::

    [
        ["plain text"],
        ["bold link", [["b"], ["a", "https://example.com"]]],
        ["‣", [["d", {"type": "date", "start_date": "2019-03-26"}]]],
    ]

Each element is ``[text]`` or ``[text, [attr, ...]]`` and each attribute is
``[code]`` or ``[code, value]``. This module turns that structure into
:class:`~notion2html.ast.spans.TextSpan` objects. It does not apply any
markup; attribute order is preserved for the renderer.

Any structural problem raises :class:`~notion2html.exceptions.DecodeError`.

"""

from __future__ import annotations

from typing import Any, Mapping

from notion2html.ast.spans import FLAG_ATTRS, STRING_ATTRS, Attribute, AttrType, Date, TextSpan
from notion2html.exceptions import DecodeError

_DATE_FIELDS = ("start_date", "start_time", "end_date", "end_time", "date_format", "time_format", "type")

_CODES = {attr_type.value: attr_type for attr_type in AttrType}


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def parse_date(raw: Any) -> Date:
    """Decode the payload of a ``d`` attribute.

    Parameters
    ----------
    raw : Mapping
        Date object, e.g. ``{"type": "date", "start_date": "2019-03-26"}``

    Returns
    -------
    Date
        Decoded date; unknown keys (such as reminders) are ignored

    Raises
    ------
    DecodeError
        If ``raw`` is not a mapping or a known field is not a string

    """
    if not isinstance(raw, Mapping):
        raise DecodeError(f"date value is not an object: {type(raw).__name__} {raw!r}", raw_value=raw)

    values: dict[str, Any] = {}
    for name in _DATE_FIELDS:
        value = raw.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise DecodeError(f"date field '{name}' is not a string: {value!r}", raw_value=raw)
        values[name] = value

    time_zone = raw.get("time_zone")
    if time_zone is not None and not isinstance(time_zone, str):
        raise DecodeError(f"date field 'time_zone' is not a string: {time_zone!r}", raw_value=raw)

    return Date(time_zone=time_zone, **values)


def parse_attribute(raw: Any) -> Attribute:
    """Decode one ``[code]`` or ``[code, value]`` attribute."""
    if not _is_array(raw):
        raise DecodeError(f"attribute is not an array: {type(raw).__name__} {raw!r}", raw_value=raw)
    if len(raw) == 0:
        raise DecodeError("attribute array is empty", raw_value=raw)
    if len(raw) > 2:
        raise DecodeError(f"attribute array has {len(raw)} elements, expected 1 or 2: {raw!r}", raw_value=raw)

    code = raw[0]
    if not isinstance(code, str):
        raise DecodeError(f"attribute code is not a string: {type(code).__name__} {code!r}", raw_value=raw)

    attr_type = _CODES.get(code)
    if attr_type is None:
        raise DecodeError(f"unexpected attribute '{code}'", raw_value=raw)

    if len(raw) == 1:
        if attr_type not in FLAG_ATTRS:
            raise DecodeError(f"attribute '{code}' requires a value", raw_value=raw)
        return Attribute(attr_type)

    if attr_type in FLAG_ATTRS:
        raise DecodeError(f"unexpected value for attribute '{code}': {raw[1]!r}", raw_value=raw)

    value = raw[1]
    if attr_type in STRING_ATTRS:
        if not isinstance(value, str):
            raise DecodeError(
                f"value for '{code}' attribute is not a string: {type(value).__name__} {value!r}", raw_value=raw
            )
        return Attribute(attr_type, value)

    return Attribute(attr_type, parse_date(value))


def parse_text_span(raw: Any) -> TextSpan:
    """Decode one ``[text]`` or ``[text, [attr, ...]]`` element."""
    if not _is_array(raw):
        raise DecodeError(f"text span is not an array: {type(raw).__name__} {raw!r}", raw_value=raw)
    if len(raw) not in (1, 2):
        raise DecodeError(f"text span has {len(raw)} elements, expected 1 or 2: {raw!r}", raw_value=raw)

    text = raw[0]
    if not isinstance(text, str):
        raise DecodeError(f"text span text is not a string: {type(text).__name__} {text!r}", raw_value=raw)
    if len(raw) == 1:
        return TextSpan(text)

    raw_attrs = raw[1]
    if not _is_array(raw_attrs):
        raise DecodeError(
            f"text span attributes are not an array: {type(raw_attrs).__name__} {raw_attrs!r}", raw_value=raw
        )
    return TextSpan(text, tuple(parse_attribute(attr) for attr in raw_attrs))


def parse_text_spans(raw: Any) -> list[TextSpan]:
    """Decode a rich-text token array into text spans.

    Parameters
    ----------
    raw : list or None
        Token array as found in block properties. None stands for an absent
        property and decodes to an empty list.

    Returns
    -------
    list of TextSpan
        Spans in source order

    Raises
    ------
    DecodeError
        If the structure is malformed, an attribute code is unknown, or a
        payload has the wrong type

    Examples
    --------
        >>> spans = parse_text_spans([["Hello "], ["world", [["b"]]]])
        >>> [span.text for span in spans]
        ['Hello ', 'world']
        >>> spans[1].attrs[0].type
        <AttrType.BOLD: 'b'>

    """
    if raw is None:
        return []
    if not _is_array(raw):
        raise DecodeError(f"text spans value is not an array: {type(raw).__name__} {raw!r}", raw_value=raw)
    return [parse_text_span(element) for element in raw]
