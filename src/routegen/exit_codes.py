"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific outcome and is referenced by the
corresponding :class:`~routegen.exceptions.RoutegenError` subclass.
Shell wrappers can inspect the exit code to tell a cancelled run from a
failed write without parsing stderr.

Example::

    $ routegen
    $ echo $?
    3   # EXIT_GENERATION_FAILURE -- the route file could not be written
"""

EXIT_SUCCESS = 0
"""The route was generated, or the user cancelled the wizard."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""A command was invoked with an unknown template or HTTP method."""

EXIT_GENERATION_FAILURE = 3
"""Rendering or writing the route file failed."""

EXIT_INTERRUPTED = 130
"""Interrupted by SIGINT outside of a prompt."""
