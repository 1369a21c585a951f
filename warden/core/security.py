"""
Security Type Classification
=============================

Predicates that identify the network type a configuration claims to be
(open, WEP, PSK, SAE, EAP, EAP Suite-B, OWE, WAPI) from its selected
security methods and credentials.
"""

from __future__ import annotations

from typing import Optional, Sequence

from warden.core.models import KeyMgmt, WifiConfiguration


def has_any_valid_wep_key(wep_keys: Optional[Sequence[Optional[str]]]) -> bool:
    """True when at least one WEP key slot is populated."""
    if not wep_keys:
        return False
    return any(key is not None for key in wep_keys)


def is_config_for_psk_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.WPA_PSK)


def is_config_for_wapi_psk_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.WAPI_PSK)


def is_config_for_wapi_cert_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.WAPI_CERT)


def is_config_for_sae_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.SAE)


def is_config_for_owe_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.OWE)


def is_config_for_eap_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.WPA_EAP) or config.has_key_mgmt(
        KeyMgmt.IEEE8021X
    )


def is_config_for_eap_suite_b_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.SUITE_B_192)


def is_config_for_wep_network(config: WifiConfiguration) -> bool:
    return config.has_key_mgmt(KeyMgmt.NONE) and has_any_valid_wep_key(
        config.wep_keys
    )


def is_config_for_open_network(config: WifiConfiguration) -> bool:
    """True for open and enhanced-open (OWE) networks."""
    return not (
        is_config_for_wep_network(config)
        or is_config_for_psk_network(config)
        or is_config_for_eap_network(config)
        or is_config_for_sae_network(config)
        or is_config_for_eap_suite_b_network(config)
    )


def security_label(config: WifiConfiguration) -> str:
    """Short human-readable label for the strongest claimed network type."""
    if is_config_for_eap_suite_b_network(config):
        return "WPA3-Enterprise 192-bit"
    if is_config_for_eap_network(config):
        return "WPA/WPA2-Enterprise"
    if is_config_for_sae_network(config):
        return "WPA3-Personal (SAE)"
    if is_config_for_psk_network(config):
        return "WPA/WPA2-Personal (PSK)"
    if is_config_for_wapi_psk_network(config):
        return "WAPI-PSK"
    if is_config_for_wapi_cert_network(config):
        return "WAPI-CERT"
    if is_config_for_wep_network(config):
        return "WEP"
    if is_config_for_owe_network(config):
        return "Enhanced Open (OWE)"
    return "Open"
