"""
redux-scaffold — CLI entrypoint.

Usage:
    redux-scaffold                 # auto-detect the package manager
    redux-scaffold --pnpm          # force pnpm (also --yarn, --npm)
    python -m redux_scaffold --dir path/to/next-app
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from redux_scaffold import __version__
from redux_scaffold.core.observability.logging_config import setup_logging

_LAYOUT_STYLE = {
    "created": ("📝", "green"),
    "patched": ("✏️ ", "green"),
    "unchanged": ("⊘ ", "cyan"),
    "failed": ("⚠️ ", "yellow"),
}


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.version_option(version=__version__, prog_name="redux-scaffold")
@click.option("--pnpm", "use_pnpm", is_flag=True, help="Install with pnpm.")
@click.option("--yarn", "use_yarn", is_flag=True, help="Install with yarn.")
@click.option("--npm", "use_npm", is_flag=True, help="Install with npm.")
@click.option(
    "--dir",
    "project_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Next.js project directory (default: current directory).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="Path to redux-scaffold.yml (default: auto-detect).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(
    ctx: click.Context,
    use_pnpm: bool,
    use_yarn: bool,
    use_npm: bool,
    project_dir: Path | None,
    config_path: Path | None,
    as_json: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Add Redux Toolkit to a Next.js app.

    Installs redux, react-redux and @reduxjs/toolkit, writes a demo
    slice, a store and a provider under src/app/redux/, and wraps
    src/app/layout.js in <ReduxProvider>.
    """
    from redux_scaffold.core.config.loader import ConfigError, build_config
    from redux_scaffold.core.use_cases.setup import run_setup

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("RDX_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("RDX_LOG_FILE"),
        log_file_level=os.environ.get("RDX_LOG_FILE_LEVEL"),
    )

    flags = [
        name
        for name, on in (("pnpm", use_pnpm), ("yarn", use_yarn), ("npm", use_npm))
        if on
    ]

    try:
        config = build_config(
            project_dir=project_dir,
            flags=flags,
            config_path=config_path,
        )
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if not quiet and not as_json:
        click.secho("📦 Installing Redux packages...", fg="cyan")

    result = run_setup(config)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not quiet:
        assert result.package_manager is not None
        click.echo(f"   Installed with {result.package_manager.name}")
        for path in result.files_written:
            click.secho(f"   ✓ {path}", fg="green")

    layout = result.layout
    assert layout is not None
    icon, color = _LAYOUT_STYLE[layout.status]
    if layout.status == "failed" or not quiet:
        click.secho(f"   {icon} {layout.message}", fg=color)

    if not quiet:
        click.echo()
        click.secho("✅ Redux setup complete!", fg="green", bold=True)


if __name__ == "__main__":
    cli()
