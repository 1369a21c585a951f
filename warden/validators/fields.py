"""
Warden Field Validators
========================

Leaf validators for individual configuration fields: SSID, BSSID,
PSK/SAE password, WEP key set, multi-valued selection sets, the
key-management combination rule and IP configuration completeness.

Every validator returns ``True`` / ``False`` and never raises for bad
content. Each rejection is logged at ERROR with the failing field, the
bound that was violated and the offending value (secrets are reported
by length only).

Encoding rules:

    ===========  ====================================  ==================
    Field        Quoted form (bytes incl. quotes)      Hex form (chars)
    ===========  ====================================  ==================
    SSID         3 .. max_ssid_bytes + 2 (UTF-8)       2 .. 64
    PSK          10 .. 65 (ASCII)                      exactly 64
    SAE          3 .. 65 (ASCII)                       exactly 64
    WEP key      decodes to 5 or 13 bytes              decodes to 5 or 13
    ===========  ====================================  ==================

References:
    - IEEE. (2020). IEEE Std 802.11-2020. Section 9.4.2.2: SSID element.
    - IEEE. (2020). IEEE Std 802.11-2020. Annex J.4: Suggested
      pass-phrase-to-PSK mapping (8..63 ASCII characters).
"""

from __future__ import annotations

import enum
from typing import Iterable, Optional, Sequence

from shared.logger import WardenLogger

from warden.core.encoding import (
    QUOTE,
    EncodingError,
    decode_ssid,
    hex_or_quoted_to_bytes,
)
from warden.core.mac import MacAddress, MacAddressType
from warden.core.models import (
    BITSET_FIELDS,
    BSSID_ANY,
    PASSWORD_MASK,
    IpAssignment,
    IpConfiguration,
    KeyMgmt,
    WifiConfiguration,
)

logger = WardenLogger("warden.validators.fields")


# ---------------------------------------------------------------------------
# Length bounds
# ---------------------------------------------------------------------------

ENCLOSING_QUOTES_LEN = 2
DEFAULT_MAX_SSID_BYTES = 32
SSID_UTF8_MIN_LEN = 1 + ENCLOSING_QUOTES_LEN
SSID_HEX_MIN_LEN = 2
SSID_HEX_MAX_LEN = 64
PSK_ASCII_MIN_LEN = 8 + ENCLOSING_QUOTES_LEN
SAE_ASCII_MIN_LEN = 1 + ENCLOSING_QUOTES_LEN
PSK_SAE_ASCII_MAX_LEN = 63 + ENCLOSING_QUOTES_LEN
PSK_SAE_HEX_LEN = 64
WEP40_KEY_BYTES_LEN = 5
WEP104_KEY_BYTES_LEN = 13

KEY_MGMT_MAX_CARDINALITY = 3


# ---------------------------------------------------------------------------
# SSID
# ---------------------------------------------------------------------------


def validate_ssid(
    ssid: Optional[str],
    is_add: bool,
    max_ssid_bytes: int = DEFAULT_MAX_SSID_BYTES,
) -> bool:
    """Validate a quoted-UTF-8 or hex SSID.

    Args:
        ssid: SSID as submitted.
        is_add: ``True`` for an add, ``False`` for an update (where a
            ``None`` SSID means "unchanged").
        max_ssid_bytes: Maximum raw SSID length in bytes, quotes excluded.
    """
    if ssid is None:
        if is_add:
            logger.error("validate_ssid failed: null SSID", field="ssid")
            return False
        return True
    if not ssid:
        logger.error("validate_ssid failed: empty string", field="ssid")
        return False

    if ssid.startswith(QUOTE):
        # Unencodable characters count as one byte here; the decode step
        # below rejects them.
        length = len(ssid.encode("utf-8", errors="replace"))
        max_len = max_ssid_bytes + ENCLOSING_QUOTES_LEN
        if length < SSID_UTF8_MIN_LEN:
            logger.error(
                "validate_ssid failed: utf-8 SSID too small",
                field="ssid", bound=SSID_UTF8_MIN_LEN, length=length,
            )
            return False
        if length > max_len:
            logger.error(
                "validate_ssid failed: utf-8 SSID too large",
                field="ssid", bound=max_len, length=length,
            )
            return False
    else:
        length = len(ssid)
        if length < SSID_HEX_MIN_LEN:
            logger.error(
                "validate_ssid failed: hex SSID too small",
                field="ssid", bound=SSID_HEX_MIN_LEN, length=length,
            )
            return False
        if length > SSID_HEX_MAX_LEN:
            logger.error(
                "validate_ssid failed: hex SSID too large",
                field="ssid", bound=SSID_HEX_MAX_LEN, length=length,
            )
            return False

    try:
        decode_ssid(ssid)
    except EncodingError:
        logger.error(
            "validate_ssid failed: malformed string", field="ssid", value=ssid
        )
        return False
    return True


# ---------------------------------------------------------------------------
# BSSID
# ---------------------------------------------------------------------------


def validate_bssid_address(bssid: Optional[MacAddress]) -> bool:
    """A BSSID address must be unicast; ``None`` means unset."""
    if bssid is None:
        return True
    if bssid.address_type != MacAddressType.UNICAST:
        logger.error(
            "validate_bssid failed: address is not unicast",
            field="bssid", value=str(bssid), address_type=bssid.address_type.value,
        )
        return False
    return True


def validate_bssid(bssid: Optional[str]) -> bool:
    """Validate a BSSID string: unset, ``"any"`` or a unicast MAC."""
    if bssid is None:
        return True
    if not bssid:
        logger.error("validate_bssid failed: empty string", field="bssid")
        return False
    if bssid == BSSID_ANY:
        return True
    try:
        address = MacAddress.from_string(bssid)
    except ValueError:
        logger.error(
            "validate_bssid failed: malformed string", field="bssid", value=bssid
        )
        return False
    return validate_bssid_address(address)


# ---------------------------------------------------------------------------
# Password (PSK / SAE)
# ---------------------------------------------------------------------------


def validate_password(password: Optional[str], is_add: bool, is_sae: bool) -> bool:
    """Validate a PSK or SAE secret.

    On an update, ``None`` and :data:`PASSWORD_MASK` mean "unchanged" and
    pass without further checks. The mask is *not* exempt on an add.
    """
    field = "sae_password" if is_sae else "pre_shared_key"
    if password is None:
        if is_add:
            logger.error("validate_password failed: null string", field=field)
            return False
        return True
    if not is_add and password == PASSWORD_MASK:
        return True
    if not password:
        logger.error("validate_password failed: empty string", field=field)
        return False

    if password.startswith(QUOTE):
        length = len(password.encode("ascii", errors="replace"))
        min_len = SAE_ASCII_MIN_LEN if is_sae else PSK_ASCII_MIN_LEN
        if length < min_len:
            logger.error(
                "validate_password failed: ASCII string too small",
                field=field, bound=min_len, length=length,
            )
            return False
        if length > PSK_SAE_ASCII_MAX_LEN:
            logger.error(
                "validate_password failed: ASCII string too large",
                field=field, bound=PSK_SAE_ASCII_MAX_LEN, length=length,
            )
            return False
    elif len(password) != PSK_SAE_HEX_LEN:
        logger.error(
            "validate_password failed: hex string size mismatch",
            field=field, bound=PSK_SAE_HEX_LEN, length=len(password),
        )
        return False

    try:
        hex_or_quoted_to_bytes(password)
    except EncodingError:
        logger.error(
            "validate_password failed: malformed string",
            field=field, length=len(password),
        )
        return False
    return True


# ---------------------------------------------------------------------------
# WEP keys
# ---------------------------------------------------------------------------


def _all_keys_masked(wep_keys: Sequence[Optional[str]]) -> bool:
    return all(key is None or key == PASSWORD_MASK for key in wep_keys)


def validate_wep_keys(
    wep_keys: Optional[Sequence[Optional[str]]],
    wep_tx_key_index: int,
    is_add: bool,
) -> bool:
    """Validate WEP key slots and the active key index.

    Each populated slot must decode to a WEP-40 (5 byte) or WEP-104
    (13 byte) key. On an update, a missing array, or one whose populated
    slots all hold the mask, means "unchanged".
    """
    if wep_keys is None:
        if is_add:
            logger.error("validate_wep_keys failed: null key array", field="wep_keys")
            return False
        return True
    if not is_add and _all_keys_masked(wep_keys):
        return True

    for index, key in enumerate(wep_keys):
        if key is None:
            continue
        try:
            key_bytes = hex_or_quoted_to_bytes(key)
        except EncodingError:
            logger.error(
                "validate_wep_keys failed: malformed key",
                field="wep_keys", index=index, length=len(key),
            )
            return False
        if len(key_bytes) not in (WEP40_KEY_BYTES_LEN, WEP104_KEY_BYTES_LEN):
            logger.error(
                "validate_wep_keys failed: invalid key length",
                field="wep_keys", index=index,
                bound=(WEP40_KEY_BYTES_LEN, WEP104_KEY_BYTES_LEN),
                length=len(key_bytes),
            )
            return False

    if not 0 <= wep_tx_key_index < len(wep_keys):
        logger.error(
            "validate_wep_keys failed: invalid tx key index",
            field="wep_tx_key_index", bound=len(wep_keys), value=wep_tx_key_index,
        )
        return False
    return True


# ---------------------------------------------------------------------------
# Multi-valued selections
# ---------------------------------------------------------------------------


def validate_bitset(
    values: Optional[Iterable[int]], enum_cls: type[enum.IntEnum]
) -> bool:
    """Every selected index must lie in ``[0, len(enum_cls))``."""
    if values is None:
        return False
    valid_count = len(enum_cls)
    return all(0 <= int(value) < valid_count for value in values)


def validate_bitsets(config: WifiConfiguration) -> bool:
    """Validate every multi-valued selection field of *config*."""
    for field_name, enum_cls in BITSET_FIELDS.items():
        values = getattr(config, field_name)
        if not validate_bitset(values, enum_cls):
            logger.error(
                f"validate_bitsets failed: invalid {field_name} selection",
                field=field_name,
                bound=len(enum_cls),
                value=None if values is None else sorted(values),
            )
            return False
    return True


def validate_key_mgmt(key_mgmt: set[int]) -> bool:
    """Enforce the only legal multi-method combination.

    A single method (or none) is always accepted. Otherwise the set is
    ``{WPA_EAP, IEEE8021X | WPA_PSK}`` optionally plus ``SUITE_B_192``.
    """
    cardinality = len(key_mgmt)
    if cardinality <= 1:
        return True
    if cardinality > KEY_MGMT_MAX_CARDINALITY:
        logger.error(
            "validate_key_mgmt failed: too many methods",
            field="allowed_key_management",
            bound=KEY_MGMT_MAX_CARDINALITY, length=cardinality,
        )
        return False
    if KeyMgmt.WPA_EAP not in key_mgmt:
        logger.error(
            "validate_key_mgmt failed: WPA_EAP missing from combination",
            field="allowed_key_management", value=sorted(key_mgmt),
        )
        return False
    if KeyMgmt.IEEE8021X not in key_mgmt and KeyMgmt.WPA_PSK not in key_mgmt:
        logger.error(
            "validate_key_mgmt failed: combination needs IEEE8021X or WPA_PSK",
            field="allowed_key_management", value=sorted(key_mgmt),
        )
        return False
    if cardinality == KEY_MGMT_MAX_CARDINALITY and KeyMgmt.SUITE_B_192 not in key_mgmt:
        logger.error(
            "validate_key_mgmt failed: three-method combination needs SUITE_B_192",
            field="allowed_key_management", value=sorted(key_mgmt),
        )
        return False
    return True


# ---------------------------------------------------------------------------
# IP configuration
# ---------------------------------------------------------------------------


def validate_ip_configuration(ip_config: Optional[IpConfiguration]) -> bool:
    """A STATIC assignment needs static parameters with an address."""
    if ip_config is None:
        logger.error(
            "validate_ip_configuration failed: null IP configuration",
            field="ip_configuration",
        )
        return False
    if ip_config.ip_assignment == IpAssignment.STATIC:
        static_config = ip_config.static_ip_configuration
        if static_config is None:
            logger.error(
                "validate_ip_configuration failed: null static configuration",
                field="static_ip_configuration",
            )
            return False
        if static_config.ip_address is None:
            logger.error(
                "validate_ip_configuration failed: null static IP address",
                field="static_ip_configuration.ip_address",
            )
            return False
    return True
