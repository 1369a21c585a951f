"""
Warden Console Output
======================

Rich-based console output for the NetWarden command-line interface:
validation verdicts, specifier verdicts, change-detection tables,
scan-filter entries and network rankings.

References:
    - Rich library: https://github.com/Textualize/rich
    - NetWarden Console: shared.console.WardenConsole
"""

from __future__ import annotations

import enum
from typing import Iterable, Optional, Sequence

from rich.table import Table

from shared.console import WardenConsole

from warden.comparators.priority import network_status_score
from warden.core.models import (
    KeyMgmt,
    NetworkSpecifier,
    PnoAuthCode,
    PnoFlag,
    PnoNetwork,
    ValidationOutcome,
    WifiConfiguration,
)
from warden.core.security import security_label


# ---------------------------------------------------------------------------
# Colour mappings
# ---------------------------------------------------------------------------

_SECURITY_COLORS: dict[str, str] = {
    "WPA3-Enterprise 192-bit": "bold bright_green",
    "WPA3-Personal (SAE)": "bold bright_green",
    "Enhanced Open (OWE)": "bold green",
    "WPA/WPA2-Enterprise": "bold green",
    "WPA/WPA2-Personal (PSK)": "bold yellow",
    "WAPI-PSK": "bold yellow",
    "WAPI-CERT": "bold yellow",
    "WEP": "bold red",
    "Open": "bold white on red",
}

_STATUS_COLORS: dict[int, str] = {
    3: "bold green",
    2: "bold yellow",
    1: "bold red",
}


def format_selection(values: Iterable[int], enum_cls: type[enum.IntEnum]) -> str:
    """Render a selection set as enum member names, in index order.

    Indices outside *enum_cls* are shown as ``#<index>``.
    """
    names = []
    for index in sorted(values):
        try:
            names.append(enum_cls(index).name)
        except ValueError:
            names.append(f"#{index}")
    return ", ".join(names) if names else "-"


def _flag(changed: bool) -> str:
    return "[bold yellow]CHANGED[/bold yellow]" if changed else "[green]unchanged[/green]"


# ---------------------------------------------------------------------------
# Console Output
# ---------------------------------------------------------------------------


class WardenConsoleOutput:
    """Rich-based display of NetWarden results.

    Usage::

        output = WardenConsoleOutput()
        output.display_validation(config, outcome, is_add=True)
        output.display_ranking(ordered)
    """

    def __init__(self, console: Optional[WardenConsole] = None) -> None:
        """Initialize the console output.

        Args:
            console: WardenConsole instance. Creates a new one if None.
        """
        self._console = console or WardenConsole()

    @property
    def console(self) -> WardenConsole:
        return self._console

    def _security_cell(self, config: WifiConfiguration) -> str:
        label = security_label(config)
        color = _SECURITY_COLORS.get(label, "")
        return f"[{color}]{label}[/{color}]" if color else label

    # ------------------------------------------------------------------ #
    #  Verdicts
    # ------------------------------------------------------------------ #

    def display_validation(
        self,
        submitted: WifiConfiguration,
        outcome: ValidationOutcome,
        is_add: bool,
    ) -> None:
        """Display a configuration verdict and the sanitized security methods."""
        self._console.section("Configuration Validation")
        adjusted = outcome.configuration
        self._console.key_values(
            "Configuration",
            [
                ("Mode", "add" if is_add else "update"),
                ("Network ID", submitted.network_id),
                ("SSID", submitted.ssid if submitted.ssid is not None else "-"),
                ("Security", self._security_cell(submitted)),
                (
                    "Key management",
                    format_selection(submitted.allowed_key_management, KeyMgmt),
                ),
                (
                    "Sanitized key management",
                    format_selection(adjusted.allowed_key_management, KeyMgmt),
                ),
                ("PMF required", "yes" if submitted.require_pmf else "no"),
            ],
        )
        if outcome.valid:
            self._console.success("Configuration accepted")
        else:
            self._console.error("Configuration rejected (see log for the failing check)")

    def display_specifier(self, specifier: NetworkSpecifier, valid: bool) -> None:
        """Display a network specifier verdict."""
        self._console.section("Network Specifier Validation")
        ssid_pattern = specifier.ssid_pattern
        bssid_pattern = specifier.bssid_pattern
        self._console.key_values(
            "Network Specifier",
            [
                (
                    "SSID pattern",
                    "-" if ssid_pattern is None
                    else f"{ssid_pattern.type.value} {ssid_pattern.path!r}",
                ),
                (
                    "BSSID pattern",
                    "-" if bssid_pattern is None
                    else f"{bssid_pattern.base} / {bssid_pattern.mask}",
                ),
                ("Security", self._security_cell(specifier.wifi_configuration)),
            ],
        )
        if valid:
            self._console.success("Network specifier accepted")
        else:
            self._console.error("Network specifier rejected (see log for the failing check)")

    # ------------------------------------------------------------------ #
    #  Comparison
    # ------------------------------------------------------------------ #

    def display_comparison(
        self,
        existing: WifiConfiguration,
        new: WifiConfiguration,
        flags: Sequence[tuple[str, bool]],
        same_network: bool,
    ) -> None:
        """Display change-detector results for a saved/incoming pair.

        Args:
            existing: Saved configuration.
            new: Incoming configuration.
            flags: ``(detector label, changed)`` pairs in display order.
            same_network: Same-network verdict.
        """
        self._console.section("Configuration Comparison")
        self._console.table(
            f"{existing.ssid or '-'} -> {new.ssid or '-'}",
            ("Detector", "Result"),
            [(label, _flag(changed)) for label, changed in flags],
            styles=("bold", ""),
        )

        if same_network:
            self._console.success("Both configurations describe the same network")
        else:
            self._console.warning("Configurations describe different networks")

    # ------------------------------------------------------------------ #
    #  Scan shortlist
    # ------------------------------------------------------------------ #

    def display_scan_filter(self, entry: PnoNetwork) -> None:
        """Display one periodic-scan filter entry."""
        self._console.section("Scan Filter Entry")
        flags = [flag.name for flag in PnoFlag if entry.has_flag(flag)]
        auth = [code.name for code in PnoAuthCode if entry.has_auth(code)]
        self._console.key_values(
            "PNO Network",
            [
                ("SSID", entry.ssid if entry.ssid is not None else "-"),
                ("Flags", f"{entry.flags:#04x} ({', '.join(flags) or '-'})"),
                ("Auth", f"{entry.auth_bit_field:#04x} ({', '.join(auth) or '-'})"),
            ],
        )

    def display_ranking(self, configs: Sequence[WifiConfiguration], tie_break: str) -> None:
        """Display saved networks in ranking order."""
        self._console.section("Network Ranking")
        table = Table(
            title="Ranked Networks",
            caption=f"status first, then {tie_break}",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        table.add_column("#", justify="right", width=3)
        table.add_column("Network ID", justify="right")
        table.add_column("SSID", style="bold")
        table.add_column("Status")
        table.add_column("Security")
        table.add_column("Last Connected", justify="right")
        table.add_column("Associations", justify="right")

        for rank, config in enumerate(configs, start=1):
            color = _STATUS_COLORS.get(network_status_score(config), "")
            status = config.selection_status.value
            table.add_row(
                str(rank),
                str(config.network_id),
                config.ssid or "[dim italic]<none>[/dim italic]",
                f"[{color}]{status}[/{color}]",
                self._security_cell(config),
                str(config.last_connected),
                str(config.num_association),
            )
        self._console.rich.print(table)
