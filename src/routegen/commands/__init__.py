"""Built-in CLI commands for routegen.

* :mod:`~routegen.commands.generate` -- the interactive wizard, run when
  ``routegen`` is invoked without a sub-command.
* :mod:`~routegen.commands.templates` -- list the built-in templates.

Each module exports a plain callback function registered directly on the
root app.
"""
