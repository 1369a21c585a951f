"""
PNO Scan Filter Entries
========================

Derives the per-network record handed to the periodic network offload
(PNO) scanner: which SSID to look for, whether it needs a directed scan,
which bands to cover and which authentication class to accept.
"""

from __future__ import annotations

from warden.core.models import (
    KeyMgmt,
    PnoAuthCode,
    PnoFlag,
    PnoNetwork,
    WifiConfiguration,
)


def build_scan_filter_entry(config: WifiConfiguration) -> PnoNetwork:
    """Build the PNO filter entry for *config*.

    Hidden networks get a directed scan. Both the 2.4 GHz and 5 GHz
    bands are always requested. The auth code is PSK when WPA-PSK is
    selected, EAPOL for WPA-EAP / IEEE 802.1X, and OPEN otherwise.
    """
    flags = PnoFlag.A_BAND | PnoFlag.G_BAND
    if config.hidden_ssid:
        flags |= PnoFlag.DIRECTED_SCAN

    if config.has_key_mgmt(KeyMgmt.WPA_PSK):
        auth = PnoAuthCode.PSK
    elif config.has_key_mgmt(KeyMgmt.WPA_EAP) or config.has_key_mgmt(
        KeyMgmt.IEEE8021X
    ):
        auth = PnoAuthCode.EAPOL
    else:
        auth = PnoAuthCode.OPEN

    return PnoNetwork(ssid=config.ssid, flags=int(flags), auth_bit_field=int(auth))
