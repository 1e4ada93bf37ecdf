#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the bbview library.

Exception Hierarchy
-------------------
- BBViewError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a parser or renderer)

  - ConfigError (configuration file discovery and loading)

  - ParsingError (strict-mode markup errors)

  - RenderingError (draw failures raised by a sink)

"""

from typing import Any


class BBViewError(Exception):
    """Base exception class for all bbview-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(BBViewError):
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
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(BBViewError):
    """Exception raised when a configuration file cannot be read or parsed.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error with the file path."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class ParsingError(BBViewError):
    """Exception raised when BBCode markup is rejected in strict mode.

    The parser is total in its default mode; this error only surfaces when
    ``strict_mode`` is enabled.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    position : int, optional
        Character offset of the offending tag in the normalised source

    """

    def __init__(self, message: str, position: int | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.position = position


class RenderingError(BBViewError):
    """Exception raised when a sink fails to draw output."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
