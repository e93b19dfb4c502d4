#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/dependencies.py
"""Optional-dependency checks and timing helpers."""

from __future__ import annotations

import importlib
import importlib.metadata
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Optional

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from notion2html.exceptions import DependencyError

logger = logging.getLogger(__name__)


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of a distribution, or None if absent."""
    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> tuple[bool, Optional[str]]:
    """Check whether the installed version of a package satisfies ``version_spec``.

    Parameters
    ----------
    package_name : str
        Distribution name, e.g. "jinja2"
    version_spec : str
        PEP 440 specifier, e.g. ">=3.1.0"

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None
    try:
        return Version(installed_version) in SpecifierSet(version_spec), installed_version
    except (InvalidSpecifier, InvalidVersion):
        logger.debug("Cannot compare %s %s against %r", package_name, installed_version, version_spec)
        return False, installed_version


def requires_dependencies(feature_name: str, packages: list[tuple[str, str, str]]) -> Callable:
    """Check optional packages before running the decorated function.

    Parameters
    ----------
    feature_name : str
        Feature name shown in the error message (e.g. "template")
    packages : list of tuple
        (install_name, import_name, version_spec) triples; an empty
        ``version_spec`` accepts any installed version

    Raises
    ------
    DependencyError
        When the decorated function is called and a package is missing or
        has an incompatible version

    Examples
    --------
        >>> @requires_dependencies("template", [("jinja2", "jinja2", ">=3.1.0")])
        ... def render_template(path, context):
        ...     import jinja2
        ...     ...

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing: list[tuple[str, str]] = []
            version_mismatches: list[tuple[str, str, str]] = []
            original_error: ImportError | None = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets, installed = check_version_requirement(install_name, version_spec)
                    if not meets:
                        version_mismatches.append((install_name, version_spec, installed or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    feature_name=feature_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(log: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of a block at DEBUG level.

    Nothing is measured when DEBUG is disabled for ``log``.

    Examples
    --------
        >>> with debug_timer(logger, "Rendering page"):
        ...     html = converter.to_html()

    """
    if log.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        log.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
