#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the inlinemail library.

This module defines the exception classes raised by the attribute rewriting
engine and the image inlining pipelines. Only structurally invalid inputs are
raised to the caller; unresolvable image references are skipped (and logged)
unless the caller opts into strict resource handling.

Exception Hierarchy
-------------------
- InlineMailError (base exception)

  - ValidationError (parameter validation)
    - InvalidTagNameError (tag name unsafe for a scan pattern)

  - InvalidEntityError (numeric character reference out of range)

  - InvalidURIError (malformed file: URI)

  - ResourceError (local image could not be inlined, strict mode only)
    - ResourceNotFoundError (local image missing on disk)

"""

from typing import Any


class InlineMailError(Exception):
    """Base exception class for all inlinemail-specific errors.

    Catching this will catch every error raised deliberately by the library.

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


class ValidationError(InlineMailError):
    """Exception raised for invalid input parameters.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class InvalidTagNameError(ValidationError):
    """Exception raised when a tag name cannot be used to build a scan pattern.

    Tag names are interpolated into a regular expression, so anything other
    than a simple identifier is rejected before compilation.

    Parameters
    ----------
    tag_name : str
        The rejected tag name
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, tag_name: str, message: str | None = None):
        """Initialize the invalid tag name error."""
        if message is None:
            message = f"Invalid tag name {tag_name!r}; expected a letter followed by word characters"
        super().__init__(message, parameter_name="tag_name", parameter_value=tag_name)
        self.tag_name = tag_name


class InvalidEntityError(InlineMailError):
    """Exception raised when a numeric character reference cannot be decoded.

    Parameters
    ----------
    entity : str
        The hex payload that failed to decode
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The underlying decode error, if any

    """

    def __init__(self, entity: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid entity error."""
        if message is None:
            message = f"Invalid character code {entity!r}; expected between 1 and 8 hex digits"
        super().__init__(message, original_error=original_error)
        self.entity = entity


class InvalidURIError(InlineMailError):
    """Exception raised for a malformed ``file:`` URI.

    Parameters
    ----------
    uri : str
        The URI that could not be converted to a path
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, uri: str, message: str | None = None):
        """Initialize the invalid URI error."""
        if message is None:
            message = f"Invalid file URI: {uri}"
        super().__init__(message)
        self.uri = uri


class ResourceError(InlineMailError):
    """Exception raised when a local image reference cannot be inlined.

    Only raised when ``InlineOptions.fail_on_resource_errors`` is enabled;
    otherwise the reference is left unchanged and a message is logged.

    Parameters
    ----------
    message : str
        Description of the failure
    src : str, optional
        The attribute value that referenced the resource
    file_path : str, optional
        The resolved filesystem path
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        src: str | None = None,
        file_path: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the resource error."""
        super().__init__(message, original_error=original_error)
        self.src = src
        self.file_path = file_path


class ResourceNotFoundError(ResourceError):
    """Exception raised when a referenced local image does not exist.

    Parameters
    ----------
    src : str
        The attribute value that referenced the resource
    file_path : str
        The resolved filesystem path that was not found

    """

    def __init__(self, src: str, file_path: str):
        """Initialize the resource not found error."""
        super().__init__(f"Image file not found: {file_path}", src=src, file_path=file_path)
