"""AppContext — settings, logging setup, and result emission for the CLI.

Created once per invocation. Centralizes stdout/stderr routing and exit
codes so the command body only runs the service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from clustercfg.commands.exit_codes import exit_code_for
from clustercfg.output.formatters import format_result

if TYPE_CHECKING:
    from clustercfg.config.settings import ClusterSettings
    from clustercfg.services.result import ServiceResult


class AppContext:
    """Per-invocation state for the clustercfg command."""

    def __init__(self, settings: ClusterSettings) -> None:
        self.settings = settings

        from clustercfg.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with the code for the error kind
          (see :mod:`clustercfg.commands.exit_codes`).
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            return
        click.echo(output, err=True)
        code = result.error.code if result.error else None
        raise SystemExit(exit_code_for(code))
