#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/base.py
"""Base classes for page renderers.

:class:`BaseRenderer` fixes the public rendering interface (string, bytes, or
a file/stream destination). :class:`BufferStack` is the output accumulator
renderers use to capture a sub-tree into a string, e.g. the contents of a
table cell or a table-of-contents entry, without disturbing the enclosing
output.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union, cast

from notion2html.ast.nodes import Page
from notion2html.exceptions import InvalidOptionsError, OutputWriteError
from notion2html.options.base import BaseRendererOptions


def _is_binary_stream(output: Any) -> bool:
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


class BufferStack:
    """LIFO stack of string buffers.

    Writes always go to the top buffer. ``pop()`` removes the top buffer and
    returns its contents; the caller decides where that text goes next.

    Examples
    --------
        >>> buffers = BufferStack()
        >>> buffers.push()
        >>> buffers.write("<td>")
        >>> buffers.push()
        >>> buffers.write("cell")
        >>> inner = buffers.pop()
        >>> buffers.write(inner + "</td>")
        >>> buffers.pop()
        '<td>cell</td>'

    """

    def __init__(self) -> None:
        self._buffers: list[list[str]] = []

    def push(self) -> None:
        """Start a new, empty buffer on top of the stack."""
        self._buffers.append([])

    def pop(self) -> str:
        """Remove the top buffer and return its contents.

        Raises
        ------
        RuntimeError
            If the stack is empty

        """
        if not self._buffers:
            raise RuntimeError("pop() called on an empty BufferStack")
        return "".join(self._buffers.pop())

    def write(self, text: str) -> None:
        """Append ``text`` to the top buffer.

        Raises
        ------
        RuntimeError
            If the stack is empty

        """
        if not self._buffers:
            raise RuntimeError("write() called on an empty BufferStack")
        self._buffers[-1].append(text)

    @property
    def depth(self) -> int:
        return len(self._buffers)

    def clear(self) -> None:
        self._buffers.clear()


class BaseRenderer(ABC):
    """Abstract base class for page renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, page: Page) -> str:
        """Render a page to a string.

        Parameters
        ----------
        page : Page
            Page to render

        Returns
        -------
        str
            Rendered page

        """

    def render_to_bytes(self, page: Page) -> bytes:
        """Render a page to UTF-8 encoded bytes."""
        return self.render_to_string(page).encode("utf-8")

    def render(self, page: Page, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a page and write it to ``output``.

        Parameters
        ----------
        page : Page
            Page to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary mode
            - File-like object in text mode

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If a file path cannot be written

        """
        self.write_text_output(self.render_to_string(page), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text to a file path or stream.

        Binary streams receive UTF-8 bytes; text streams receive ``text``
        unchanged.

        Raises
        ------
        OutputWriteError
            If a file path cannot be written
        TypeError
            If ``output`` is neither a path nor a writable stream

        Examples
        --------
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output("<p>Hi</p>", buffer)
            >>> buffer.getvalue()
            b'<p>Hi</p>'

        """
        if isinstance(output, (str, Path)):
            path = Path(output)
            try:
                path.write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(path), original_error=e) from e
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output).__name__}")

        if _is_binary_stream(output):
            cast(IO[bytes], output).write(text.encode("utf-8"))
        else:
            cast(IO[str], output).write(text)
