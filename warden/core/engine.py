"""
Warden Engine
==============

Facade over the NetWarden validators, change detectors, scan-filter
builder and priority comparator. The engine binds the active
:class:`~shared.config.ValidationConfig` limits into every validator
call and tags each call's log records with its operation name.

The engine owns no state beyond its configuration and the validators
built from it, and performs no I/O; every method may be called
concurrently on distinct configurations.

References:
    - Evans, E. (2003). Domain-Driven Design. Addison-Wesley.
      Chapter 5: Services.
"""

from __future__ import annotations

from typing import Iterable, Optional

from shared.config import WardenConfig
from shared.logger import WardenLogger

from warden.comparators import changes
from warden.comparators.priority import TieBreak, by_last_connected, sort_networks
from warden.core.models import (
    NetworkSpecifier,
    PnoNetwork,
    ValidationOutcome,
    WifiConfiguration,
)
from warden.core.pno import build_scan_filter_entry
from warden.validators.configuration import ConfigurationValidator
from warden.validators.specifier import SpecifierValidator

logger = WardenLogger("warden.core.engine")


class WardenEngine:
    """Entry point for validating and comparing network configurations.

    Usage::

        engine = WardenEngine()
        if engine.validate_configuration(config, is_add=True):
            ...
        outcome = engine.sanitize_and_validate(config, is_add=True)
        same = engine.is_same_network(saved, outcome.configuration)
    """

    def __init__(self, config: Optional[WardenConfig] = None) -> None:
        """Initialize the engine.

        Args:
            config: NetWarden configuration. Uses defaults if None.
        """
        self._config = config or WardenConfig()
        max_ssid_bytes = self._config.validation.ssid_utf8_max_bytes
        self._config_validator = ConfigurationValidator(max_ssid_bytes)
        self._specifier_validator = SpecifierValidator(max_ssid_bytes)

    @property
    def config(self) -> WardenConfig:
        return self._config

    @property
    def max_ssid_bytes(self) -> int:
        """Raw SSID byte limit passed to the SSID validator."""
        return self._config_validator.max_ssid_bytes

    # ------------------------------------------------------------------ #
    #  Validation
    # ------------------------------------------------------------------ #

    def validate_configuration(self, config: WifiConfiguration, is_add: bool) -> bool:
        """Validate a configuration for an add (``True``) or update (``False``)."""
        with logger.operation("validate_configuration"):
            valid = self._config_validator.validate(config, is_add)
            logger.debug(
                "Configuration verdict",
                network_id=config.network_id,
                is_add=is_add,
                valid=valid,
            )
            return valid

    def sanitize_and_validate(
        self, config: WifiConfiguration, is_add: bool
    ) -> ValidationOutcome:
        """Validate *config* and return the verdict with its sanitized copy."""
        with logger.operation("sanitize_and_validate"):
            return self._config_validator.sanitize_and_validate(config, is_add)

    def validate_network_specifier(self, specifier: NetworkSpecifier) -> bool:
        with logger.operation("validate_network_specifier"):
            valid = self._specifier_validator.validate(specifier)
            logger.debug("Network specifier verdict", valid=valid)
            return valid

    # ------------------------------------------------------------------ #
    #  Comparison
    # ------------------------------------------------------------------ #

    def has_credential_changed(
        self, existing: WifiConfiguration, new: WifiConfiguration
    ) -> bool:
        with logger.operation("has_credential_changed"):
            return changes.has_credential_changed(existing, new)

    def has_ip_changed(
        self, existing: Optional[WifiConfiguration], new: WifiConfiguration
    ) -> bool:
        return changes.has_ip_changed(existing, new)

    def has_proxy_changed(
        self, existing: Optional[WifiConfiguration], new: WifiConfiguration
    ) -> bool:
        return changes.has_proxy_changed(existing, new)

    def has_mac_randomization_changed(
        self, existing: Optional[WifiConfiguration], new: WifiConfiguration
    ) -> bool:
        return changes.has_mac_randomization_changed(existing, new)

    def is_same_network(
        self, config: Optional[WifiConfiguration], other: Optional[WifiConfiguration]
    ) -> bool:
        with logger.operation("is_same_network"):
            return changes.is_same_network(config, other)

    # ------------------------------------------------------------------ #
    #  Scan shortlist
    # ------------------------------------------------------------------ #

    def build_scan_filter_entry(self, config: WifiConfiguration) -> PnoNetwork:
        return build_scan_filter_entry(config)

    def sort_networks(
        self,
        configs: Iterable[WifiConfiguration],
        tie_break: TieBreak = by_last_connected,
    ) -> list[WifiConfiguration]:
        """Rank saved networks by selection status, then by *tie_break*."""
        ordered = sort_networks(configs, tie_break)
        logger.debug("Ranked networks", count=len(ordered))
        return ordered
