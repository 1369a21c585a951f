"""Leaf field validator tests."""

from itertools import combinations

from warden.core.models import (
    GroupMgmtCipher,
    IpAssignment,
    IpConfiguration,
    KeyMgmt,
    StaticIpConfiguration,
    WifiConfiguration,
)
from warden.validators.fields import (
    validate_bitset,
    validate_bitsets,
    validate_bssid,
    validate_ip_configuration,
    validate_key_mgmt,
    validate_password,
    validate_ssid,
    validate_wep_keys,
)

IS_ADD = True
IS_UPDATE = False
EXTENDED_MAX_SSID_BYTES = 48


def _quoted(text: str) -> str:
    return f'"{text}"'


# ---------------------------------------------------------------------------
# SSID
# ---------------------------------------------------------------------------


def test_ssid_quoted_length_bounds() -> None:
    """Ensure quoted SSIDs of 3..34 encoded bytes pass and others fail."""
    assert validate_ssid(_quoted("MyNetwork"), IS_ADD)
    assert validate_ssid(_quoted("a"), IS_ADD)
    assert validate_ssid(_quoted("a" * 32), IS_ADD)
    assert not validate_ssid(_quoted(""), IS_ADD)
    assert not validate_ssid(_quoted("a" * 33), IS_ADD)


def test_ssid_multibyte_length_counts_bytes() -> None:
    """Ensure the bound applies to UTF-8 bytes, not characters."""
    assert validate_ssid(_quoted("é" * 16), IS_ADD)
    assert not validate_ssid(_quoted("é" * 17), IS_ADD)


def test_ssid_extended_limit() -> None:
    """Ensure a larger byte limit admits longer SSIDs."""
    ssid = _quoted("a" * 40)
    assert not validate_ssid(ssid, IS_ADD)
    assert validate_ssid(ssid, IS_ADD, EXTENDED_MAX_SSID_BYTES)


def test_ssid_undecodable_fails_regardless_of_length() -> None:
    """Ensure an SSID that cannot be UTF-8 encoded is rejected."""
    assert not validate_ssid(_quoted("\ud800abc"), IS_ADD)
    assert not validate_ssid('"abc', IS_ADD)


def test_ssid_hex_bounds() -> None:
    """Ensure hex SSIDs of 2..64 digits pass when well formed."""
    assert validate_ssid("4d79", IS_ADD)
    assert validate_ssid("ab" * 32, IS_ADD)
    assert not validate_ssid("4", IS_ADD)
    assert not validate_ssid("ab" * 33, IS_ADD)
    assert not validate_ssid("zz", IS_ADD)
    assert not validate_ssid("abc", IS_ADD)


def test_ssid_null_and_empty() -> None:
    """Ensure a null SSID is only acceptable on an update."""
    assert not validate_ssid(None, IS_ADD)
    assert validate_ssid(None, IS_UPDATE)
    assert not validate_ssid("", IS_ADD)
    assert not validate_ssid("", IS_UPDATE)


# ---------------------------------------------------------------------------
# BSSID
# ---------------------------------------------------------------------------


def test_bssid_values() -> None:
    """Ensure unset, wildcard and unicast BSSIDs pass."""
    assert validate_bssid(None)
    assert validate_bssid("any")
    assert validate_bssid("00:11:22:33:44:55")


def test_bssid_rejections() -> None:
    """Ensure empty, malformed and non-unicast BSSIDs fail."""
    assert not validate_bssid("")
    assert not validate_bssid("garbage")
    assert not validate_bssid("ff:ff:ff:ff:ff:ff")
    assert not validate_bssid("01:00:5e:00:00:01")


# ---------------------------------------------------------------------------
# Password
# ---------------------------------------------------------------------------


def test_psk_ascii_bounds() -> None:
    """Ensure PSK pass-phrases of 8..63 characters pass."""
    assert validate_password(_quoted("password"), IS_ADD, is_sae=False)
    assert validate_password(_quoted("a" * 63), IS_ADD, is_sae=False)
    assert not validate_password(_quoted("passwor"), IS_ADD, is_sae=False)
    assert not validate_password(_quoted("a" * 64), IS_ADD, is_sae=False)


def test_sae_ascii_minimum() -> None:
    """Ensure SAE accepts a one-character password but not an empty one."""
    assert validate_password(_quoted("a"), IS_ADD, is_sae=True)
    assert not validate_password(_quoted(""), IS_ADD, is_sae=True)
    assert not validate_password(_quoted("a"), IS_ADD, is_sae=False)


def test_psk_hex_must_be_64_digits() -> None:
    """Ensure a raw PSK is exactly 64 well-formed hex digits."""
    assert validate_password("a1" * 32, IS_ADD, is_sae=False)
    assert not validate_password("a" * 63, IS_ADD, is_sae=False)
    assert not validate_password("z" * 64, IS_ADD, is_sae=False)


def test_password_mask_only_exempt_on_update() -> None:
    """Ensure the mask sentinel passes on an update and fails on an add."""
    assert validate_password("*", IS_UPDATE, is_sae=False)
    assert validate_password("*", IS_UPDATE, is_sae=True)
    assert not validate_password("*", IS_ADD, is_sae=False)
    assert not validate_password("*", IS_ADD, is_sae=True)


def test_password_null() -> None:
    """Ensure a null password is only acceptable on an update."""
    assert not validate_password(None, IS_ADD, is_sae=False)
    assert validate_password(None, IS_UPDATE, is_sae=False)
    assert not validate_password("", IS_UPDATE, is_sae=False)


# ---------------------------------------------------------------------------
# WEP keys
# ---------------------------------------------------------------------------


def test_wep_key_lengths() -> None:
    """Ensure only 5 and 13 byte keys are accepted."""
    assert validate_wep_keys([_quoted("abcde"), None, None, None], 0, IS_ADD)
    assert validate_wep_keys(["0102030405", None, None, None], 0, IS_ADD)
    assert validate_wep_keys([None, _quoted("abcdefghijklm"), None, None], 1, IS_ADD)
    assert not validate_wep_keys([_quoted("abcd"), None, None, None], 0, IS_ADD)
    assert not validate_wep_keys([_quoted("abcdefgh"), None, None, None], 0, IS_ADD)
    assert not validate_wep_keys(["01020304zz", None, None, None], 0, IS_ADD)


def test_wep_tx_index_bounds() -> None:
    """Ensure the active index lies inside the key array."""
    keys = [_quoted("abcde"), None, None, None]
    assert validate_wep_keys(keys, 3, IS_ADD)
    assert not validate_wep_keys(keys, 4, IS_ADD)
    assert not validate_wep_keys(keys, -1, IS_ADD)


def test_wep_update_leniency() -> None:
    """Ensure missing or fully masked keys mean 'unchanged' on an update."""
    masked = ["*", None, None, None]
    assert validate_wep_keys(masked, 0, IS_UPDATE)
    assert validate_wep_keys(None, 0, IS_UPDATE)
    assert not validate_wep_keys(masked, 0, IS_ADD)
    assert not validate_wep_keys(None, 0, IS_ADD)


# ---------------------------------------------------------------------------
# Selections
# ---------------------------------------------------------------------------


def test_bitset_range() -> None:
    """Ensure indices must fall inside the enum."""
    assert validate_bitset({KeyMgmt.NONE, KeyMgmt.WAPI_CERT}, KeyMgmt)
    assert validate_bitset(set(), KeyMgmt)
    assert not validate_bitset({len(KeyMgmt)}, KeyMgmt)
    assert not validate_bitset({-1}, KeyMgmt)
    assert not validate_bitset(None, KeyMgmt)


def test_bitsets_cover_every_selection_field() -> None:
    """Ensure an out-of-range group management cipher is caught."""
    assert validate_bitsets(WifiConfiguration())
    config = WifiConfiguration(allowed_group_management_ciphers={len(GroupMgmtCipher)})
    assert not validate_bitsets(config)


def test_key_mgmt_legal_combinations() -> None:
    """Ensure the allowed multi-method combinations pass."""
    assert validate_key_mgmt(set())
    assert validate_key_mgmt({KeyMgmt.SAE})
    assert validate_key_mgmt({KeyMgmt.WPA_EAP, KeyMgmt.WPA_PSK})
    assert validate_key_mgmt({KeyMgmt.WPA_EAP, KeyMgmt.IEEE8021X})
    assert validate_key_mgmt({KeyMgmt.WPA_EAP, KeyMgmt.IEEE8021X, KeyMgmt.SUITE_B_192})


def test_key_mgmt_illegal_combinations() -> None:
    """Ensure other combinations fail."""
    assert not validate_key_mgmt({KeyMgmt.WPA_PSK, KeyMgmt.SAE})
    assert not validate_key_mgmt({KeyMgmt.WPA_EAP, KeyMgmt.SAE})
    assert not validate_key_mgmt({KeyMgmt.WPA_EAP, KeyMgmt.WPA_PSK, KeyMgmt.SAE})


def test_key_mgmt_four_methods_always_fail() -> None:
    """Ensure every four-method selection is rejected."""
    for methods in combinations(KeyMgmt, 4):
        assert not validate_key_mgmt(set(methods))


# ---------------------------------------------------------------------------
# IP configuration
# ---------------------------------------------------------------------------


def test_ip_configuration_completeness() -> None:
    """Ensure a STATIC assignment needs an address."""
    assert validate_ip_configuration(IpConfiguration())
    assert not validate_ip_configuration(None)
    assert not validate_ip_configuration(
        IpConfiguration(ip_assignment=IpAssignment.STATIC)
    )
    assert not validate_ip_configuration(
        IpConfiguration(
            ip_assignment=IpAssignment.STATIC,
            static_ip_configuration=StaticIpConfiguration(),
        )
    )
    assert validate_ip_configuration(
        IpConfiguration(
            ip_assignment=IpAssignment.STATIC,
            static_ip_configuration=StaticIpConfiguration(ip_address="192.0.2.10/24"),
        )
    )
