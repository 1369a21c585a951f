"""
Warden Network Specifier Validator
===================================

Validates a network specifier: an SSID pattern plus a BSSID base/mask
pattern describing a class of acceptable networks, together with the
security constraints (an embedded partial configuration) the matching
network must meet.

Two degenerate specifiers are rejected outright:

    match-none  A literal SSID pattern with an empty value, or the BSSID
                pattern (ff:ff:ff:ff:ff:ff, ff:ff:ff:ff:ff:ff).
    match-all   An SSID pattern matching the empty string together with
                the BSSID pattern (00:00:00:00:00:00, 00:00:00:00:00:00).

Security constraints are checked with add semantics; a specifier has no
update mode, so a masked or missing password is never accepted.
"""

from __future__ import annotations

from typing import Optional

from shared.logger import WardenLogger

from warden.core.encoding import add_enclosing_quotes
from warden.core.mac import (
    ALL_ZEROS_ADDRESS,
    BROADCAST_ADDRESS,
    MacAddress,
    MacAddressType,
)
from warden.core.models import (
    BssidPattern,
    KeyMgmt,
    NetworkSpecifier,
    PatternType,
    WifiConfiguration,
)
from warden.validators.fields import (
    DEFAULT_MAX_SSID_BYTES,
    validate_bitsets,
    validate_bssid_address,
    validate_key_mgmt,
    validate_password,
    validate_ssid,
)
from warden.validators.policy import check_pmf_required

logger = WardenLogger("warden.validators.specifier")

MATCH_EMPTY_SSID_PATTERN_PATH = ""
MATCH_NONE_BSSID_PATTERN = (BROADCAST_ADDRESS, BROADCAST_ADDRESS)
MATCH_ALL_BSSID_PATTERN = (ALL_ZEROS_ADDRESS, ALL_ZEROS_ADDRESS)


def is_valid_network_specifier(specifier: NetworkSpecifier) -> bool:
    """Both patterns and all of their components must be present."""
    ssid_pattern = specifier.ssid_pattern
    bssid_pattern = specifier.bssid_pattern
    if ssid_pattern is None or bssid_pattern is None:
        return False
    if ssid_pattern.path is None:
        return False
    return bssid_pattern.base is not None and bssid_pattern.mask is not None


def is_match_none_network_specifier(specifier: NetworkSpecifier) -> bool:
    """True when the specifier can never match any network.

    The literal-empty-SSID rule and the broadcast BSSID rule are
    independent: either one alone makes the specifier match nothing.
    """
    ssid_pattern = specifier.ssid_pattern
    if (
        ssid_pattern.type == PatternType.LITERAL
        and ssid_pattern.path == MATCH_EMPTY_SSID_PATTERN_PATH
    ):
        return True
    return specifier.bssid_pattern.as_pair() == MATCH_NONE_BSSID_PATTERN


def is_match_all_network_specifier(specifier: NetworkSpecifier) -> bool:
    """True when the specifier would match every network."""
    return (
        specifier.ssid_pattern.match(MATCH_EMPTY_SSID_PATTERN_PATH)
        and specifier.bssid_pattern.as_pair() == MATCH_ALL_BSSID_PATTERN
    )


def validate_bssid_pattern(bssid_pattern: Optional[BssidPattern]) -> bool:
    """Validate a masked (non-exact) BSSID pattern.

    The base must be unicast, and an all-zero mask (every bit is
    "don't care") is only meaningful with an all-zero base.
    """
    if bssid_pattern is None:
        return True
    base: MacAddress = bssid_pattern.base
    mask: MacAddress = bssid_pattern.mask
    if base.address_type != MacAddressType.UNICAST:
        logger.error(
            "validate_bssid_pattern failed: invalid base address",
            field="bssid_pattern.base", value=str(base),
        )
        return False
    if mask == ALL_ZEROS_ADDRESS and base != ALL_ZEROS_ADDRESS:
        logger.error(
            "validate_bssid_pattern failed: invalid mask/base",
            field="bssid_pattern", value=f"{mask}/{base}",
        )
        return False
    return True


class SpecifierValidator:
    """Admission checks for network specifiers.

    Usage::

        validator = SpecifierValidator(max_ssid_bytes=32)
        if validator.validate(specifier):
            ...
    """

    def __init__(self, max_ssid_bytes: int = DEFAULT_MAX_SSID_BYTES) -> None:
        self._max_ssid_bytes = max_ssid_bytes

    @property
    def max_ssid_bytes(self) -> int:
        return self._max_ssid_bytes

    def validate(self, specifier: NetworkSpecifier) -> bool:
        """Validate a network specifier received from an external caller.

        Returns:
            ``True`` if the specifier is well formed, is neither match-none
            nor match-all, and its security constraints are consistent.
        """
        if not is_valid_network_specifier(specifier):
            logger.error("validate_network_specifier failed: invalid network specifier")
            return False
        if is_match_none_network_specifier(specifier):
            logger.error("validate_network_specifier failed: match-none specifier")
            return False
        if is_match_all_network_specifier(specifier):
            logger.error("validate_network_specifier failed: match-all specifier")
            return False
        return self._validate_patterns(specifier) and self._validate_security(
            specifier.wifi_configuration
        )

    def _validate_patterns(self, specifier: NetworkSpecifier) -> bool:
        ssid_pattern = specifier.ssid_pattern
        if ssid_pattern.type == PatternType.LITERAL:
            # A literal SSID must itself be a valid quoted SSID.
            if not validate_ssid(
                add_enclosing_quotes(ssid_pattern.path), True, self._max_ssid_bytes
            ):
                return False
        elif specifier.wifi_configuration.hidden_ssid:
            logger.error(
                "validate_network_specifier failed: SSID pattern not supported "
                "for hidden networks",
                field="wifi_configuration.hidden_ssid", value=True,
            )
            return False

        bssid_pattern = specifier.bssid_pattern
        if bssid_pattern.mask == BROADCAST_ADDRESS:
            # Exact BSSID match: the base must be a usable BSSID.
            return validate_bssid_address(bssid_pattern.base)
        return validate_bssid_pattern(bssid_pattern)

    @staticmethod
    def _validate_security(config: WifiConfiguration) -> bool:
        """Security constraints, always judged with add semantics."""
        if not validate_bitsets(config):
            return False
        if not validate_key_mgmt(config.allowed_key_management):
            return False
        if config.has_key_mgmt(KeyMgmt.WPA_PSK) and not validate_password(
            config.pre_shared_key, True, is_sae=False
        ):
            return False
        if not check_pmf_required(config, KeyMgmt.OWE):
            return False
        if config.has_key_mgmt(KeyMgmt.SAE):
            if not check_pmf_required(config, KeyMgmt.SAE):
                return False
            if not validate_password(config.pre_shared_key, True, is_sae=True):
                return False
        return check_pmf_required(config, KeyMgmt.SUITE_B_192)


def validate_network_specifier(
    specifier: NetworkSpecifier,
    max_ssid_bytes: int = DEFAULT_MAX_SSID_BYTES,
) -> bool:
    """One-shot :meth:`SpecifierValidator.validate`."""
    return SpecifierValidator(max_ssid_bytes).validate(specifier)
