"""
Warden CLI
===========

Click-based command-line interface for the NetWarden validation engine.
Every command reads one or more JSON documents describing network
configurations (or a network specifier) and reports the engine's
verdict.

Commands:
    warden validate CONFIG_JSON [--update]       Validate a configuration
    warden specifier SPECIFIER_JSON              Validate a network specifier
    warden compare EXISTING_JSON NEW_JSON        Run the change detectors
    warden pno CONFIG_JSON                       Build a scan filter entry
    warden rank CONFIGS_JSON [--tie-break ...]   Rank saved networks

Common options:
    --config PATH       NetWarden configuration file (TOML)
    --format FORMAT     table or json output
    --quiet             Suppress console output
    --verbose           Enable debug logging
    --log-file PATH     Also write logs to a rotating file
    --json-logs         Write the log file as JSON lines

Exit status:
    0  success (for validate / specifier: the document is valid)
    1  the document is invalid, or the configuration file is missing
    2  the document is malformed (bad JSON or wrong field types)

References:
    - Click Documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, NoReturn, Optional, TypeVar

import click
from pydantic import BaseModel, TypeAdapter, ValidationError

from shared.config import WardenConfig
from shared.console import WardenConsole
from shared.logger import configure_logging

from warden.comparators.priority import TIE_BREAKS
from warden.core.engine import WardenEngine
from warden.core.models import NetworkSpecifier, WifiConfiguration
from warden.output.console import WardenConsoleOutput

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_MALFORMED = 2

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_CONFIG_LIST = TypeAdapter(list[WifiConfiguration])


# ---------------------------------------------------------------------------
# Document loading
# ---------------------------------------------------------------------------


def _read_document(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def _load_model(path: str, model: type[_ModelT]) -> _ModelT:
    """Parse *path* as JSON into *model*, exiting with status 2 on error."""
    try:
        return model.model_validate_json(_read_document(path))
    except ValidationError as exc:
        _report_malformed(path, exc)


def _load_config_list(path: str) -> list[WifiConfiguration]:
    try:
        return _CONFIG_LIST.validate_json(_read_document(path))
    except ValidationError as exc:
        _report_malformed(path, exc)


def _report_malformed(path: str, exc: ValidationError) -> NoReturn:
    click.echo(f"Error: {path} is not a valid document", err=True)
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        click.echo(f"  {location}: {error['msg']}", err=True)
    sys.exit(EXIT_MALFORMED)


def _emit_json(ctx: click.Context, payload: Any) -> None:
    ctx.obj["console"].rich.print_json(data=payload)


# ---------------------------------------------------------------------------
# CLI Group
# ---------------------------------------------------------------------------


@click.group(
    name="warden",
    help=(
        "NETWARDEN - Wireless Configuration Validator\n\n"
        "Validate wireless network configurations and network specifiers "
        "before admission, detect credential / IP / proxy changes between "
        "a saved and an incoming configuration, and rank saved networks "
        "for the periodic-scan shortlist."
    ),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to NetWarden configuration file (TOML).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default=None,
    help="Output format (default: from configuration, else table).",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress console output (exit status only).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write logs to this rotating log file.",
)
@click.option(
    "--json-logs",
    is_flag=True,
    default=False,
    help="Write the log file as JSON lines.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    output_format: Optional[str],
    quiet: bool,
    verbose: bool,
    log_file: Optional[str],
    json_logs: bool,
) -> None:
    """NetWarden - main CLI entry point."""
    ctx.ensure_object(dict)

    # Load configuration
    try:
        config = WardenConfig.load(config_path) if config_path else WardenConfig()
    except FileNotFoundError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_INVALID)

    settings = config.global_settings
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=log_file or settings.log_file,
        json_logs=json_logs or settings.log_json,
        console_output=not quiet,
    )

    console = WardenConsole(quiet=quiet)

    ctx.obj["config"] = config
    ctx.obj["console"] = console
    ctx.obj["output"] = WardenConsoleOutput(console)
    ctx.obj["engine"] = WardenEngine(config)
    ctx.obj["format"] = (output_format or settings.output_format).lower()


# ---------------------------------------------------------------------------
# Validation Commands
# ---------------------------------------------------------------------------


@cli.command(
    name="validate",
    help=(
        "Validate a network configuration.\n\n"
        "Runs the add-mode pipeline (or update mode with --update, where "
        "a missing or masked secret means 'unchanged'). Prints the verdict "
        "and the security methods after sanitization."
    ),
)
@click.argument("config_json", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--update",
    is_flag=True,
    default=False,
    help="Validate as an update of an existing network.",
)
@click.pass_context
def validate(ctx: click.Context, config_json: str, update: bool) -> None:
    """Validate a network configuration document."""
    engine: WardenEngine = ctx.obj["engine"]
    config = _load_model(config_json, WifiConfiguration)
    is_add = not update

    outcome = engine.sanitize_and_validate(config, is_add)

    if ctx.obj["format"] == "json":
        _emit_json(
            ctx,
            {
                "valid": outcome.valid,
                "mode": "add" if is_add else "update",
                "allowed_key_management": sorted(
                    outcome.configuration.allowed_key_management
                ),
            },
        )
    else:
        ctx.obj["output"].display_validation(config, outcome, is_add)

    sys.exit(EXIT_OK if outcome.valid else EXIT_INVALID)


@cli.command(
    name="specifier",
    help=(
        "Validate a network specifier.\n\n"
        "Rejects match-none and match-all patterns, checks the SSID and "
        "BSSID patterns, then applies the add-mode security checks to the "
        "embedded configuration."
    ),
)
@click.argument("specifier_json", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def specifier(ctx: click.Context, specifier_json: str) -> None:
    """Validate a network specifier document."""
    engine: WardenEngine = ctx.obj["engine"]
    network_specifier = _load_model(specifier_json, NetworkSpecifier)

    valid = engine.validate_network_specifier(network_specifier)

    if ctx.obj["format"] == "json":
        _emit_json(ctx, {"valid": valid})
    else:
        ctx.obj["output"].display_specifier(network_specifier, valid)

    sys.exit(EXIT_OK if valid else EXIT_INVALID)


# ---------------------------------------------------------------------------
# Comparison Command
# ---------------------------------------------------------------------------


@cli.command(
    name="compare",
    help=(
        "Compare a saved configuration with an incoming one.\n\n"
        "Reports whether credentials, IP settings, proxy settings or the "
        "MAC randomization mode changed, and whether both describe the "
        "same network."
    ),
)
@click.argument("existing_json", type=click.Path(exists=True, dir_okay=False))
@click.argument("new_json", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def compare(ctx: click.Context, existing_json: str, new_json: str) -> None:
    """Run every change detector over two configuration documents."""
    engine: WardenEngine = ctx.obj["engine"]
    existing = _load_model(existing_json, WifiConfiguration)
    new = _load_model(new_json, WifiConfiguration)

    flags = [
        ("credentials", engine.has_credential_changed(existing, new)),
        ("ip", engine.has_ip_changed(existing, new)),
        ("proxy", engine.has_proxy_changed(existing, new)),
        ("mac_randomization", engine.has_mac_randomization_changed(existing, new)),
    ]
    same_network = engine.is_same_network(existing, new)

    if ctx.obj["format"] == "json":
        payload: dict[str, Any] = {f"{label}_changed": changed for label, changed in flags}
        payload["same_network"] = same_network
        _emit_json(ctx, payload)
    else:
        ctx.obj["output"].display_comparison(existing, new, flags, same_network)


# ---------------------------------------------------------------------------
# Scan Shortlist Commands
# ---------------------------------------------------------------------------


@cli.command(
    name="pno",
    help="Build the periodic-scan filter entry for a configuration.",
)
@click.argument("config_json", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def pno(ctx: click.Context, config_json: str) -> None:
    """Print the scan filter entry derived from a configuration document."""
    engine: WardenEngine = ctx.obj["engine"]
    config = _load_model(config_json, WifiConfiguration)

    entry = engine.build_scan_filter_entry(config)

    if ctx.obj["format"] == "json":
        _emit_json(ctx, entry.model_dump())
    else:
        ctx.obj["output"].display_scan_filter(entry)


@cli.command(
    name="rank",
    help=(
        "Rank saved networks.\n\n"
        "Orders a JSON list of configurations by selection status "
        "(enabled, temporarily disabled, permanently disabled), breaking "
        "ties by recency of the last connection or by association count."
    ),
)
@click.argument("configs_json", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--tie-break",
    type=click.Choice(sorted(TIE_BREAKS), case_sensitive=False),
    default="recency",
    show_default=True,
    help="Ordering among networks with the same status.",
)
@click.pass_context
def rank(ctx: click.Context, configs_json: str, tie_break: str) -> None:
    """Rank a list of configuration documents."""
    engine: WardenEngine = ctx.obj["engine"]
    configs = _load_config_list(configs_json)
    tie_break = tie_break.lower()

    ordered = engine.sort_networks(configs, TIE_BREAKS[tie_break])

    if ctx.obj["format"] == "json":
        _emit_json(
            ctx,
            [
                {
                    "network_id": config.network_id,
                    "ssid": config.ssid,
                    "selection_status": config.selection_status.value,
                }
                for config in ordered
            ],
        )
    else:
        ctx.obj["output"].display_ranking(ordered, tie_break)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the NetWarden CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
