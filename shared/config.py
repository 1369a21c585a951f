"""
NetWarden Configuration Management
===================================

Centralized configuration for the NetWarden validation engine using
Python dataclasses and TOML-based persistence.

Only ambient settings live here (logging, output format, SSID length
limits). Wireless network configurations themselves are never read
from or written to disk by NetWarden.

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
    - IEEE. (2020). IEEE Std 802.11-2020. Section 9.4.2.2: SSID element.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional


# ---------------------------------------------------------------------------
# Default configuration file path relative to the NetWarden root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "netwarden.toml"


# ========================== Validation Settings ============================


@dataclass(frozen=False, slots=True)
class ValidationConfig:
    """Limits applied by the configuration and specifier validators.

    The 802.11 SSID element carries at most 32 octets. Deployments that
    accept SSIDs in a legacy multi-byte charset (e.g. GBK) transcode them
    to UTF-8 before validation, which can grow the byte length; the
    extended limit covers that case.
    """

    max_ssid_bytes: int = 32
    extended_ssid_charset: bool = False
    extended_max_ssid_bytes: int = 48

    @property
    def ssid_utf8_max_bytes(self) -> int:
        """Maximum raw SSID byte length in effect (quotes excluded)."""
        if self.extended_ssid_charset:
            return self.extended_max_ssid_bytes
        return self.max_ssid_bytes


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across NetWarden modules.

    Controls logging verbosity, log destinations and the CLI output
    format.
    """

    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_json: bool = False
    output_format: str = "table"
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class WardenConfig:
    """Master configuration aggregating global and validation settings.

    Usage:
        >>> config = WardenConfig.load()                   # from default path
        >>> config = WardenConfig.load("custom.toml")      # from custom path
        >>> config.validation.ssid_utf8_max_bytes
        32
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> WardenConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``netwarden.toml`` in
        the project root. Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`WardenConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            validation=cls._build_section(ValidationConfig, raw.get("validation", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files keep loading on older releases.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def get_config(path: str | Path | None = None) -> WardenConfig:
    """Module-level convenience wrapper around :meth:`WardenConfig.load`.

    Caches the result so that repeated calls share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = WardenConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
