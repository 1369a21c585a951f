"""
Warden Change Detectors
========================

Pairwise comparisons between a stored configuration and an incoming one
for the same network: did the credentials change (forcing a reconnect),
did the IP or proxy settings change, did the MAC randomization mode
change, and are the two the same network at all.
"""

from __future__ import annotations

from typing import Optional

from shared.logger import WardenLogger

from warden.core.models import (
    BITSET_FIELDS,
    EnterpriseConfig,
    IpAssignment,
    IpConfiguration,
    MacRandomization,
    ProxySettings,
    StaticIpConfiguration,
    WifiConfiguration,
)

logger = WardenLogger("warden.comparators.changes")

# Scalar credential fields compared after the selection sets.
_CREDENTIAL_FIELDS = (
    "pre_shared_key",
    "wep_keys",
    "wep_tx_key_index",
    "hidden_ssid",
    "require_pmf",
    "carrier_id",
)


def get_eap_sim_num(enterprise_config: EnterpriseConfig) -> int:
    """SIM slot count, 0 when unset."""
    if not enterprise_config.sim_num:
        return 0
    return int(enterprise_config.sim_num)


def has_enterprise_config_changed(
    existing: Optional[EnterpriseConfig],
    new: Optional[EnterpriseConfig],
) -> bool:
    """Compare two 802.1X credential blocks.

    For SIM-based methods the SIM card is the credential, so only the
    EAP method is compared.
    """
    if existing is None or new is None:
        return existing is not None or new is not None

    if existing.eap_method != new.eap_method:
        return True
    if existing.is_authentication_sim_based:
        return False
    return (
        existing.phase2_method != new.phase2_method
        or get_eap_sim_num(existing) != get_eap_sim_num(new)
        or existing.identity != new.identity
        or existing.anonymous_identity != new.anonymous_identity
        or existing.password != new.password
        or existing.ca_certificates != new.ca_certificates
        or existing.ca_certificate_aliases != new.ca_certificate_aliases
        or existing.client_certificate_alias != new.client_certificate_alias
        or existing.alt_subject_match != new.alt_subject_match
        or existing.ocsp != new.ocsp
    )


def has_credential_changed(existing: WifiConfiguration, new: WifiConfiguration) -> bool:
    """True when any security selection or credential differs."""
    for field_name in (*BITSET_FIELDS, *_CREDENTIAL_FIELDS):
        if getattr(existing, field_name) != getattr(new, field_name):
            logger.debug("Credential change detected", field=field_name)
            return True
    if has_enterprise_config_changed(existing.enterprise_config, new.enterprise_config):
        logger.debug("Credential change detected", field="enterprise_config")
        return True
    return False


def _ip_assignment(ip_config: Optional[IpConfiguration]) -> IpAssignment:
    if ip_config is None:
        return IpAssignment.UNASSIGNED
    return ip_config.ip_assignment


def _static_config(ip_config: Optional[IpConfiguration]) -> Optional[StaticIpConfiguration]:
    if ip_config is None:
        return None
    return ip_config.static_ip_configuration


def has_ip_changed(existing: Optional[WifiConfiguration], new: WifiConfiguration) -> bool:
    """True when the IP assignment, or a static assignment's parameters, changed.

    With no existing configuration only a STATIC assignment counts as a
    change.
    """
    new_assignment = _ip_assignment(new.ip_configuration)
    if existing is None:
        return new_assignment == IpAssignment.STATIC
    if _ip_assignment(existing.ip_configuration) != new_assignment:
        return True
    if new_assignment == IpAssignment.STATIC:
        return _static_config(existing.ip_configuration) != _static_config(
            new.ip_configuration
        )
    return False


def has_proxy_changed(existing: Optional[WifiConfiguration], new: WifiConfiguration) -> bool:
    """True when the proxy mode or proxy parameters changed.

    With no existing configuration, any mode other than NONE counts as a
    change.
    """
    if existing is None:
        return new.proxy_settings != ProxySettings.NONE
    if existing.proxy_settings != new.proxy_settings:
        return True
    return existing.http_proxy != new.http_proxy


def has_mac_randomization_changed(
    existing: Optional[WifiConfiguration], new: WifiConfiguration
) -> bool:
    """True when the MAC randomization mode changed.

    With no existing configuration, any mode other than AUTO counts as a
    change.
    """
    if existing is None:
        return new.mac_randomization != MacRandomization.AUTO
    return existing.mac_randomization != new.mac_randomization


def is_same_network(
    config: Optional[WifiConfiguration], other: Optional[WifiConfiguration]
) -> bool:
    """True when both describe the same network with the same credentials.

    The network-selection BSSID is not compared.
    """
    if config is None and other is None:
        return True
    if config is None or other is None:
        return False
    if config.network_id != other.network_id:
        return False
    if config.ssid != other.ssid:
        return False
    return not has_credential_changed(config, other)
