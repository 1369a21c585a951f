"""Security classification and scan filter entry tests."""

from warden.core.models import (
    KeyMgmt,
    PnoAuthCode,
    PnoFlag,
    WifiConfiguration,
)
from warden.core.pno import build_scan_filter_entry
from warden.core.security import (
    has_any_valid_wep_key,
    is_config_for_eap_network,
    is_config_for_open_network,
    is_config_for_psk_network,
    is_config_for_wep_network,
    security_label,
)

SSID = '"Office"'
EAP_METHODS = {KeyMgmt.WPA_EAP, KeyMgmt.IEEE8021X}


def test_psk_entry() -> None:
    """Ensure a PSK network gets the PSK auth code on both bands."""
    entry = build_scan_filter_entry(
        WifiConfiguration(ssid=SSID, allowed_key_management={KeyMgmt.WPA_PSK})
    )
    assert entry.ssid == SSID
    assert entry.has_auth(PnoAuthCode.PSK)
    assert entry.has_flag(PnoFlag.A_BAND)
    assert entry.has_flag(PnoFlag.G_BAND)
    assert not entry.has_flag(PnoFlag.DIRECTED_SCAN)


def test_hidden_network_gets_directed_scan() -> None:
    """Ensure hidden networks get a directed scan."""
    entry = build_scan_filter_entry(WifiConfiguration(ssid=SSID, hidden_ssid=True))
    assert entry.has_flag(PnoFlag.DIRECTED_SCAN)
    assert entry.flags == PnoFlag.DIRECTED_SCAN | PnoFlag.A_BAND | PnoFlag.G_BAND


def test_auth_code_priority() -> None:
    """Ensure PSK wins over EAP and open is the fallback."""
    eap = build_scan_filter_entry(
        WifiConfiguration(ssid=SSID, allowed_key_management={KeyMgmt.IEEE8021X})
    )
    mixed = build_scan_filter_entry(
        WifiConfiguration(
            ssid=SSID, allowed_key_management={KeyMgmt.WPA_EAP, KeyMgmt.WPA_PSK}
        )
    )
    sae = build_scan_filter_entry(
        WifiConfiguration(ssid=SSID, allowed_key_management={KeyMgmt.SAE})
    )
    assert eap.auth_bit_field == PnoAuthCode.EAPOL
    assert mixed.auth_bit_field == PnoAuthCode.PSK
    assert sae.auth_bit_field == PnoAuthCode.OPEN


def test_wep_detection() -> None:
    """Ensure WEP needs NONE selected and at least one key."""
    assert not has_any_valid_wep_key(None)
    assert not has_any_valid_wep_key([None, None, None, None])
    assert has_any_valid_wep_key([None, '"abcde"', None, None])

    wep = WifiConfiguration(
        allowed_key_management={KeyMgmt.NONE},
        wep_keys=['"abcde"', None, None, None],
    )
    assert is_config_for_wep_network(wep)
    assert not is_config_for_wep_network(
        WifiConfiguration(allowed_key_management={KeyMgmt.NONE})
    )


def test_network_type_predicates() -> None:
    """Ensure the open predicate excludes every secured type."""
    psk = WifiConfiguration(allowed_key_management={KeyMgmt.WPA_PSK})
    eap = WifiConfiguration(allowed_key_management=EAP_METHODS)
    owe = WifiConfiguration(allowed_key_management={KeyMgmt.OWE})
    assert is_config_for_psk_network(psk)
    assert is_config_for_eap_network(eap)
    assert not is_config_for_open_network(psk)
    assert not is_config_for_open_network(eap)
    assert is_config_for_open_network(owe)
    assert is_config_for_open_network(WifiConfiguration())


def test_security_labels() -> None:
    """Ensure the strongest claimed type names the network."""
    suite_b = WifiConfiguration(
        allowed_key_management={KeyMgmt.WPA_EAP, KeyMgmt.IEEE8021X, KeyMgmt.SUITE_B_192}
    )
    assert security_label(suite_b) == "WPA3-Enterprise 192-bit"
    assert security_label(WifiConfiguration(allowed_key_management=EAP_METHODS)) == (
        "WPA/WPA2-Enterprise"
    )
    assert security_label(WifiConfiguration(allowed_key_management={KeyMgmt.SAE})) == (
        "WPA3-Personal (SAE)"
    )
    assert security_label(WifiConfiguration(allowed_key_management={KeyMgmt.OWE})) == (
        "Enhanced Open (OWE)"
    )
    assert security_label(WifiConfiguration()) == "Open"
