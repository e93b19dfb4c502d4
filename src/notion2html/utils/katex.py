#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/katex.py
"""Equation typesetting through the katex command-line tool.

Install the tool with ``npm install -g katex`` (https://katex.org/docs/cli.html).
The binary reads TeX on stdin and writes HTML on stdout; ``-d`` selects display
mode.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from notion2html.constants import DEFAULT_KATEX_TIMEOUT, KATEX_BINARY_NAME
from notion2html.exceptions import ConfigurationError, ExternalToolError

logger = logging.getLogger(__name__)


def find_katex(katex_path: str | None = None) -> str:
    """Locate the katex binary.

    Parameters
    ----------
    katex_path : str or None, default None
        Explicit path to try first

    Returns
    -------
    str
        Path of an existing katex binary

    Raises
    ------
    ConfigurationError
        If neither ``katex_path`` exists nor ``katex`` is on ``PATH``

    """
    if katex_path and os.path.exists(katex_path):
        return katex_path

    found = shutil.which(KATEX_BINARY_NAME)
    if found:
        if katex_path:
            logger.debug("katex_path %s does not exist, using %s", katex_path, found)
        return found

    if katex_path:
        raise ConfigurationError(
            f"use_katex is set but katex_path ('{katex_path}') doesn't exist", parameter_name="katex_path"
        )
    raise ConfigurationError(
        "use_katex is set but couldn't locate katex binary (see https://katex.org/). "
        "You can install katex with `npm install -g katex` or provide the path to the binary via katex_path.",
        parameter_name="use_katex",
    )


def equation_to_html(katex_path: str, equation: str, timeout: float | None = DEFAULT_KATEX_TIMEOUT) -> str:
    """Typeset a TeX equation to HTML in display mode.

    Parameters
    ----------
    katex_path : str
        Path of the katex binary
    equation : str
        TeX source
    timeout : float or None, default 10.0
        Seconds to wait for the process; None waits forever

    Returns
    -------
    str
        HTML produced by katex

    Raises
    ------
    ExternalToolError
        If the process cannot start, times out, or exits with non-zero status

    """
    try:
        result = subprocess.run(
            [katex_path, "-d"],
            input=equation,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ExternalToolError("katex", f"katex timed out after {timeout}s", original_error=e) from e
    except OSError as e:
        raise ExternalToolError("katex", f"failed to run {katex_path}: {e}", original_error=e) from e

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise ExternalToolError(
            "katex", f"katex exited with status {result.returncode}: {stderr}", returncode=result.returncode
        )
    return result.stdout
