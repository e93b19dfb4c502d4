#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the notion2html library.

This module defines specialized exception classes for the error conditions
that can occur while decoding inline content and rendering a page tree to
HTML. These exceptions provide more specific error information than generic
built-ins.

Exception Hierarchy
-------------------
- Notion2HtmlError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)
    - ConfigurationError (options that cannot be satisfied, e.g. no katex binary)

  - ParsingError (input data decoding failures)
    - DecodeError (malformed inline text span tokens)

  - RenderingError (output generation failures)
    - UnsupportedBlockError (block type with no rendering rule)
    - OutputWriteError (file write failures)

  - ExternalToolError (external process failures, e.g. katex)

  - DependencyError (missing/incompatible optional packages)

"""

from typing import Any


class Notion2HtmlError(Exception):
    """Base exception class for all notion2html-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Notion2HtmlError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is given to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(ValidationError):
    """Exception raised when the requested configuration cannot be satisfied.

    Raised before any rendering starts, e.g. when equation typesetting is
    enabled but no katex binary can be located.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    parameter_name : str, optional
        Name of the option at fault

    """

    def __init__(self, message: str, parameter_name: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name=parameter_name, original_error=original_error)


class ParsingError(Notion2HtmlError):
    """Exception raised when input data cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class DecodeError(ParsingError):
    """Exception raised for a malformed inline text span token structure.

    Covers wrong shapes, unrecognized attribute codes and payloads whose type
    does not match the attribute code. Always propagated: it means the input
    data is corrupt.

    Parameters
    ----------
    message : str
        Description of the problem
    raw_value : any, optional
        The offending token value

    """

    def __init__(self, message: str, raw_value: Any = None, original_error: Exception | None = None):
        """Initialize the decode error."""
        super().__init__(message, parsing_stage="text_spans", original_error=original_error)
        self.raw_value = raw_value


class RenderingError(Notion2HtmlError):
    """Exception raised when HTML generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage of rendering where the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class UnsupportedBlockError(RenderingError):
    """Exception raised for a block type that has no rendering rule.

    Only raised in strict mode; permissive mode logs the block and emits a
    visible placeholder instead.

    Parameters
    ----------
    block_type : str
        The unrecognized type tag
    block_id : str, optional
        Identifier of the offending block

    """

    def __init__(self, block_type: str, block_id: str | None = None, message: str | None = None):
        """Initialize the unsupported block error."""
        if message is None:
            message = f"Unsupported block type '{block_type}'"
            if block_id:
                message += f" (block {block_id})"
        super().__init__(message, rendering_stage="dispatch")
        self.block_type = block_type
        self.block_id = block_id


class OutputWriteError(RenderingError):
    """Exception raised when rendered output cannot be written.

    Parameters
    ----------
    file_path : str
        Destination that could not be written

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output to: {file_path}"
        super().__init__(message, rendering_stage="output", original_error=original_error)
        self.file_path = file_path


class ExternalToolError(Notion2HtmlError):
    """Exception raised when an external process fails.

    Parameters
    ----------
    tool_name : str
        Name of the external tool (e.g. "katex")
    message : str
        Description of the failure
    returncode : int, optional
        Process exit status when the process ran to completion

    """

    def __init__(
        self,
        tool_name: str,
        message: str,
        returncode: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the external tool error."""
        super().__init__(message, original_error=original_error)
        self.tool_name = tool_name
        self.returncode = returncode


class DependencyError(Notion2HtmlError):
    """Exception raised when a required optional package is missing.

    Parameters
    ----------
    feature_name : str
        Feature that needs the packages (e.g. "template")
    missing_packages : list of tuple
        (install_name, version_spec) pairs that are not installed
    version_mismatches : list of tuple, optional
        (install_name, required_spec, installed_version) triples
    original_import_error : ImportError, optional
        First import error encountered

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            parts = []
            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                parts.append(f"'{feature_name}' requires the following packages: {pkg_list}")
            for name, required, installed in version_mismatches:
                parts.append(f"'{feature_name}' requires {name}{required}, but {installed} is installed")
            requirements = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in requirements)
            message = "\n".join(parts) + f"\nInstall with: pip install --upgrade {packages_str}"
        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error
