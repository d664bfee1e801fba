"""
openventuro.errors - Error Type
===============================

Every failure in openventuro is an :class:`OpenVenturoError`. The error
carries an :class:`ErrorKind` so callers can branch on what went wrong
without matching message text, and a display message for the user.

Errors are never retried. They propagate to ``openventuro.cli``, which
prints a failure marker plus the message and exits with status 1.

Example
-------
>>> try:
...     raise OpenVenturoError(ErrorKind.UNKNOWN_OPTION, "Unknown option: -x")
... except OpenVenturoError as e:
...     e.kind is ErrorKind.UNKNOWN_OPTION
True
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """
    Categories of failure.

    Attributes
    ----------
    UNKNOWN_OPTION : str
        An ``init`` token starting with ``-`` that is not a known flag.

    MISSING_VALUE : str
        ``--deploy-target`` given without a value.

    UNEXPECTED_ARGUMENT : str
        A second positional argument after the project name.

    UNKNOWN_COMMAND : str
        A top-level option that is neither help nor a subcommand.

    INVALID_DEPLOY_TARGET : str
        A deploy target outside the supported set.

    TARGET_NOT_EMPTY : str
        The destination directory already has entries.

    TARGET_NOT_DIRECTORY : str
        The destination path exists but is not a directory.

    WRITE_FAILED : str
        A filesystem error while creating the scaffold.

    ABORTED : str
        The user cancelled an interactive prompt.
    """

    UNKNOWN_OPTION = "unknown_option"
    MISSING_VALUE = "missing_value"
    UNEXPECTED_ARGUMENT = "unexpected_argument"
    UNKNOWN_COMMAND = "unknown_command"
    INVALID_DEPLOY_TARGET = "invalid_deploy_target"
    TARGET_NOT_EMPTY = "target_not_empty"
    TARGET_NOT_DIRECTORY = "target_not_directory"
    WRITE_FAILED = "write_failed"
    ABORTED = "aborted"


class OpenVenturoError(Exception):
    """
    The single error type raised by openventuro.

    Parameters
    ----------
    kind : ErrorKind
        What went wrong.

    message : str
        Human-readable message shown after ``Error:``.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"OpenVenturoError({self.kind.value!r}, {self.message!r})"
