# Copyright (c) 2024 osfamily Contributors
# MIT License

"""
osfamily Error Classes.

All custom exceptions for clear error handling and exit codes.
The command-line interface maps each error class to its exit code.
"""

from __future__ import annotations

import enum
from typing import Any


class ExitCode(enum.IntEnum):
    """Exit codes used by the osfamily command."""

    SUCCESS = 0
    NO_MATCH = 1
    INVALID_ARGUMENT = 2
    CLASSIFICATION_ERROR = 3
    CONFIG_ERROR = 4
    KEYBOARD_INTERRUPT = 130


class OsFamilyError(Exception):
    """Base exception for all osfamily errors."""

    exit_code: int = ExitCode.INVALID_ARGUMENT

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ClassificationError(OsFamilyError):
    """A family token outside the registry was given to the classifier."""

    exit_code: int = ExitCode.CLASSIFICATION_ERROR

    def __init__(self, family: str) -> None:
        self.family = family
        super().__init__(f"Don't know how to detect os family \"{family}\"")


class InvalidArgumentError(OsFamilyError, ValueError):
    """A required string argument was missing or of the wrong type."""

    exit_code: int = ExitCode.INVALID_ARGUMENT

    def __init__(self, argument: str, value: Any = None) -> None:
        self.argument = argument
        self.value = value
        if value is None:
            msg = f"Argument '{argument}' is required"
        else:
            msg = f"Argument '{argument}' must be a string, got {type(value).__name__}"
        super().__init__(msg)


class ConfigError(OsFamilyError):
    """Error loading snapshot facts from a file or the environment."""

    exit_code: int = ExitCode.CONFIG_ERROR

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: str | None = None,
    ) -> None:
        self.file_path = file_path
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"Config error{location}: {message}", details)


class ConditionError(OsFamilyError):
    """Error evaluating a Jinja2 build condition."""

    exit_code: int = ExitCode.INVALID_ARGUMENT

    def __init__(self, message: str, expression: str | None = None) -> None:
        self.expression = expression

        details = None
        if expression:
            # Truncate long expressions
            truncated = expression[:100] + "..." if len(expression) > 100 else expression
            details = f"Condition: {truncated}"

        super().__init__(f"Condition error: {message}", details)
