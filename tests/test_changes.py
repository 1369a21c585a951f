"""Change detector and same-network tests."""

from typing import Any

from warden.comparators.changes import (
    get_eap_sim_num,
    has_credential_changed,
    has_enterprise_config_changed,
    has_ip_changed,
    has_mac_randomization_changed,
    has_proxy_changed,
    is_same_network,
)
from warden.core.models import (
    EapMethod,
    EnterpriseConfig,
    IpAssignment,
    IpConfiguration,
    KeyMgmt,
    MacRandomization,
    Phase2Method,
    ProxyInfo,
    ProxySettings,
    SelectionStatus,
    StaticIpConfiguration,
    WifiConfiguration,
)

CREDENTIAL_CHANGES: dict[str, Any] = {
    "allowed_key_management": {KeyMgmt.SAE},
    "allowed_protocols": {1},
    "allowed_auth_algorithms": {0},
    "allowed_pairwise_ciphers": {2},
    "allowed_group_ciphers": {3},
    "allowed_group_management_ciphers": {0},
    "allowed_suite_b_ciphers": {1},
    "pre_shared_key": '"different"',
    "wep_keys": ['"abcde"', None, None, None],
    "wep_tx_key_index": 2,
    "hidden_ssid": True,
    "require_pmf": True,
    "carrier_id": 1839,
}


def _network(**overrides: Any) -> WifiConfiguration:
    fields: dict[str, Any] = {
        "network_id": 3,
        "ssid": '"Office"',
        "allowed_key_management": {KeyMgmt.WPA_PSK},
        "pre_shared_key": '"password"',
    }
    fields.update(overrides)
    return WifiConfiguration(**fields)


def _static_ip(address: str) -> IpConfiguration:
    return IpConfiguration(
        ip_assignment=IpAssignment.STATIC,
        static_ip_configuration=StaticIpConfiguration(
            ip_address=address, gateway="192.0.2.1", dns_servers=["192.0.2.53"]
        ),
    )


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


def test_credentials_unchanged_against_self() -> None:
    """Ensure a configuration never differs from itself or its copy."""
    config = _network(enterprise_config=EnterpriseConfig(eap_method=EapMethod.PEAP))
    assert not has_credential_changed(config, config)
    assert not has_credential_changed(config, config.model_copy(deep=True))


def test_each_credential_field_is_compared() -> None:
    """Ensure changing any single credential field is detected."""
    existing = _network()
    for field_name, value in CREDENTIAL_CHANGES.items():
        changed = existing.model_copy(deep=True)
        setattr(changed, field_name, value)
        assert has_credential_changed(existing, changed), field_name


def test_non_credential_fields_are_ignored() -> None:
    """Ensure priority, status and BSSID do not count as credentials."""
    existing = _network()
    updated = _network(
        priority=9,
        selection_status=SelectionStatus.TEMPORARILY_DISABLED,
        bssid="00:11:22:33:44:55",
        last_connected=1_700_000_000_000,
    )
    assert not has_credential_changed(existing, updated)


def test_enterprise_presence_change() -> None:
    """Ensure adding or removing the enterprise block is a change."""
    assert has_enterprise_config_changed(None, EnterpriseConfig())
    assert has_enterprise_config_changed(EnterpriseConfig(), None)
    assert not has_enterprise_config_changed(None, None)
    assert has_credential_changed(
        _network(), _network(enterprise_config=EnterpriseConfig())
    )


def test_enterprise_fields_compared_for_non_sim_methods() -> None:
    """Ensure identity, password and certificate changes are detected."""
    existing = EnterpriseConfig(
        eap_method=EapMethod.TTLS,
        phase2_method=Phase2Method.MSCHAPV2,
        identity="alice",
        password="secret",
        ca_certificate_aliases=["corp-ca"],
    )
    assert not has_enterprise_config_changed(existing, existing.model_copy())
    for field_name, value in (
        ("identity", "bob"),
        ("password", "other"),
        ("phase2_method", Phase2Method.PAP),
        ("ca_certificate_aliases", ["other-ca"]),
        ("alt_subject_match", "DNS:radius.example.com"),
        ("sim_num", "1"),
    ):
        changed = existing.model_copy(update={field_name: value})
        assert has_enterprise_config_changed(existing, changed), field_name


def test_sim_based_enterprise_compares_method_only() -> None:
    """Ensure only the EAP method matters when the SIM is the credential."""
    existing = EnterpriseConfig(eap_method=EapMethod.AKA, identity="0123@wlan")
    assert not has_enterprise_config_changed(
        existing, EnterpriseConfig(eap_method=EapMethod.AKA, identity="other")
    )
    assert has_enterprise_config_changed(
        existing, EnterpriseConfig(eap_method=EapMethod.SIM, identity="0123@wlan")
    )

    peap_sim = EnterpriseConfig(
        eap_method=EapMethod.PEAP, phase2_method=Phase2Method.SIM
    )
    assert peap_sim.is_authentication_sim_based
    assert not has_enterprise_config_changed(
        peap_sim, EnterpriseConfig(eap_method=EapMethod.PEAP, identity="x")
    )


def test_get_eap_sim_num() -> None:
    """Ensure an unset SIM slot count reads as zero."""
    assert get_eap_sim_num(EnterpriseConfig()) == 0
    assert get_eap_sim_num(EnterpriseConfig(sim_num="")) == 0
    assert get_eap_sim_num(EnterpriseConfig(sim_num="2")) == 2


# ---------------------------------------------------------------------------
# IP, proxy and MAC randomization
# ---------------------------------------------------------------------------


def test_ip_change_without_existing() -> None:
    """Ensure only a STATIC assignment counts as new IP settings."""
    assert not has_ip_changed(None, _network())
    assert has_ip_changed(None, _network(ip_configuration=_static_ip("192.0.2.10/24")))


def test_ip_change_detection() -> None:
    """Ensure assignment mode and static parameters are compared."""
    dhcp = _network()
    static = _network(ip_configuration=_static_ip("192.0.2.10/24"))
    moved = _network(ip_configuration=_static_ip("192.0.2.11/24"))
    assert not has_ip_changed(dhcp, _network())
    assert has_ip_changed(dhcp, static)
    assert not has_ip_changed(static, _network(ip_configuration=_static_ip("192.0.2.10/24")))
    assert has_ip_changed(static, moved)
    assert has_ip_changed(_network(ip_configuration=None), dhcp)


def test_proxy_change_detection() -> None:
    """Ensure the proxy mode and parameters are compared."""
    proxied = _network(
        proxy_settings=ProxySettings.STATIC,
        http_proxy=ProxyInfo(host="proxy.example.com", port=3128),
    )
    assert not has_proxy_changed(None, _network())
    assert has_proxy_changed(None, proxied)
    assert has_proxy_changed(_network(), proxied)
    assert not has_proxy_changed(proxied, proxied.model_copy(deep=True))
    moved = proxied.model_copy(deep=True)
    moved.http_proxy = ProxyInfo(host="proxy.example.com", port=8080)
    assert has_proxy_changed(proxied, moved)


def test_mac_randomization_change_detection() -> None:
    """Ensure only deviation from AUTO counts without an existing config."""
    assert not has_mac_randomization_changed(None, _network())
    assert has_mac_randomization_changed(
        None, _network(mac_randomization=MacRandomization.NONE)
    )
    assert has_mac_randomization_changed(
        _network(), _network(mac_randomization=MacRandomization.PERSISTENT)
    )
    assert not has_mac_randomization_changed(_network(), _network())


# ---------------------------------------------------------------------------
# Same network
# ---------------------------------------------------------------------------


def test_same_network_ignores_unrelated_fields() -> None:
    """Ensure identical id, SSID and credentials mean the same network."""
    assert is_same_network(_network(), _network(priority=5, num_association=12))


def test_same_network_broken_by_identity_or_credentials() -> None:
    """Ensure the id, SSID and credentials must all match."""
    assert not is_same_network(_network(), _network(network_id=4))
    assert not is_same_network(_network(), _network(ssid='"Lobby"'))
    assert not is_same_network(_network(), _network(pre_shared_key='"different"'))


def test_same_network_null_handling() -> None:
    """Ensure two missing configurations match and one missing does not."""
    assert is_same_network(None, None)
    assert not is_same_network(_network(), None)
    assert not is_same_network(None, _network())
