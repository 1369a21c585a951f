"""
Warden Configuration Validator
===============================

Validates a full network configuration submitted for an add or an
update. The pipeline runs the field validators and policy checks in a
fixed order and stops at the first failure:

    1. SSID
    2. BSSID
    3. Multi-valued selections (all seven families)
    4. Key-management combination rule
    5. WEP keys          (only when NONE is selected and keys are present)
    6. Pre-shared key    (only when WPA_PSK is selected)
    7. OWE PMF policy
    8. SAE PMF policy, then the SAE password
    9. Suite-B 192-bit PMF policy
   10. IP configuration completeness

Enterprise (802.1X) credentials are not validated here.

:meth:`ConfigurationValidator.validate` is side-effect free. The one
correction applied to malformed caller input, forcing the security
methods to ``{WPA_PSK}`` when a pre-shared key is set that no selected
method uses, is a separate phase (:meth:`~ConfigurationValidator.sanitize`)
that works on a copy. :meth:`~ConfigurationValidator.sanitize_and_validate`
runs both.
"""

from __future__ import annotations

from shared.logger import WardenLogger

from warden.core.models import (
    KeyMgmt,
    ValidationOutcome,
    WifiConfiguration,
)
from warden.validators.fields import (
    DEFAULT_MAX_SSID_BYTES,
    validate_bitsets,
    validate_bssid,
    validate_ip_configuration,
    validate_key_mgmt,
    validate_password,
    validate_ssid,
    validate_wep_keys,
)
from warden.validators.policy import check_pmf_required

logger = WardenLogger("warden.validators.configuration")

VALIDATE_FOR_ADD = True
VALIDATE_FOR_UPDATE = False


class ConfigurationValidator:
    """Admission checks for configurations submitted by external callers.

    The instance carries the deployment's SSID length limit, so one
    validator serves every add and update of a session.

    Usage::

        validator = ConfigurationValidator(max_ssid_bytes=32)
        if validator.validate(config, VALIDATE_FOR_ADD):
            ...
        outcome = validator.sanitize_and_validate(config, VALIDATE_FOR_UPDATE)
    """

    def __init__(self, max_ssid_bytes: int = DEFAULT_MAX_SSID_BYTES) -> None:
        self._max_ssid_bytes = max_ssid_bytes

    @property
    def max_ssid_bytes(self) -> int:
        return self._max_ssid_bytes

    def validate(self, config: WifiConfiguration, is_add: bool) -> bool:
        """Validate a configuration received from an external caller.

        Args:
            config: The submitted configuration. Not modified.
            is_add: :data:`VALIDATE_FOR_ADD` for a new network,
                :data:`VALIDATE_FOR_UPDATE` for an update, which may carry
                only the fields being changed.

        Returns:
            ``True`` if the configuration may be admitted.
        """
        if not validate_ssid(config.ssid, is_add, self._max_ssid_bytes):
            return False
        if not validate_bssid(config.bssid):
            return False
        if not validate_bitsets(config):
            return False
        if not validate_key_mgmt(config.allowed_key_management):
            return False
        if (
            config.has_key_mgmt(KeyMgmt.NONE)
            and config.wep_keys is not None
            and not validate_wep_keys(config.wep_keys, config.wep_tx_key_index, is_add)
        ):
            return False
        if config.has_key_mgmt(KeyMgmt.WPA_PSK) and not validate_password(
            config.pre_shared_key, is_add, is_sae=False
        ):
            return False
        if not check_pmf_required(config, KeyMgmt.OWE):
            return False
        if config.has_key_mgmt(KeyMgmt.SAE):
            if not check_pmf_required(config, KeyMgmt.SAE):
                return False
            if not validate_password(config.pre_shared_key, is_add, is_sae=True):
                return False
        if not check_pmf_required(config, KeyMgmt.SUITE_B_192):
            return False
        if not validate_ip_configuration(config.ip_configuration):
            return False
        return True

    def sanitize(self, config: WifiConfiguration) -> WifiConfiguration:
        """Return a copy of *config* with a stray pre-shared key reconciled.

        A configuration carrying a pre-shared key while none of its
        selected methods uses one is treated as a PSK network: its methods
        are reset to ``{WPA_PSK}``. Any other configuration is copied
        unchanged.
        """
        sanitized = config.model_copy(deep=True)
        if sanitized.pre_shared_key is not None and not sanitized.needs_pre_shared_key:
            logger.warning(
                "pre_shared_key set with an invalid key management selection, "
                "resetting key management to WPA_PSK",
                field="allowed_key_management",
                value=sorted(config.allowed_key_management),
            )
            sanitized.allowed_key_management = {KeyMgmt.WPA_PSK}
        return sanitized

    def sanitize_and_validate(
        self, config: WifiConfiguration, is_add: bool
    ) -> ValidationOutcome:
        """Validate *config* as submitted and return its sanitized copy.

        The verdict is judged on the submitted configuration; sanitization
        is applied only to accepted configurations and never changes it.
        """
        valid = self.validate(config, is_add)
        adjusted = self.sanitize(config) if valid else config.model_copy(deep=True)
        return ValidationOutcome(configuration=adjusted, valid=valid)


# ========================= Module-level convenience ========================


def validate_configuration(
    config: WifiConfiguration,
    is_add: bool,
    max_ssid_bytes: int = DEFAULT_MAX_SSID_BYTES,
) -> bool:
    """One-shot :meth:`ConfigurationValidator.validate`."""
    return ConfigurationValidator(max_ssid_bytes).validate(config, is_add)


def sanitize_configuration(config: WifiConfiguration) -> WifiConfiguration:
    """One-shot :meth:`ConfigurationValidator.sanitize`."""
    return ConfigurationValidator().sanitize(config)


def sanitize_and_validate(
    config: WifiConfiguration,
    is_add: bool,
    max_ssid_bytes: int = DEFAULT_MAX_SSID_BYTES,
) -> ValidationOutcome:
    """One-shot :meth:`ConfigurationValidator.sanitize_and_validate`."""
    return ConfigurationValidator(max_ssid_bytes).sanitize_and_validate(config, is_add)
