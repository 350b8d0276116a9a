"""Root CLI command for clustercfg."""

from __future__ import annotations

import click

from clustercfg import __version__
from clustercfg.commands._context import AppContext
from clustercfg.config.settings import ClusterSettings


@click.command()
@click.version_option(version=__version__, prog_name="clustercfg")
@click.argument("path", required=False)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(
    path: str | None,
    json_output: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Read and validate a cluster config file (default: cluster.json).

    Exit codes: 0 ok, 3 unreadable file, 4 malformed config, 5 invalid group.
    """
    from clustercfg.services.cluster import ClusterService

    settings = ClusterSettings.from_cli(
        config_path=path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    app.emit(ClusterService().info(settings.config_path))
