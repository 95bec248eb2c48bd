"""Exception hierarchy for routegen.

All exceptions inherit from :class:`RoutegenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`routegen.exit_codes`.
The top-level handler in :func:`routegen.app.main` catches ``RoutegenError``
and exits with the appropriate code, while unexpected exceptions produce a
crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    RoutegenError (exit 1)
    +-- WizardCancelled       (exit 0)
    +-- AnswerBundleError     (exit 1)
    +-- UnknownTemplateError  (exit 2)
"""

from routegen.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)


class RoutegenError(Exception):
    """Base exception for all routegen errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class WizardCancelled(RoutegenError):
    """Raised when the user aborts the wizard (Ctrl-C or EOF at a prompt).

    This is a clean exit, not a failure.
    """

    exit_code = EXIT_SUCCESS

    def __init__(self, message: str = "Operation cancelled.", exit_code: int | None = None):
        super().__init__(message, exit_code)


class AnswerBundleError(RoutegenError):
    """Raised when a wizard answer set is incomplete or malformed."""

    exit_code = EXIT_GENERIC_FAILURE


class UnknownTemplateError(RoutegenError):
    """Raised when a template key does not name a built-in template."""

    exit_code = EXIT_INVALID_USAGE

