"""
Warden Policy Checks
=====================

Protocol-mandated feature requirements layered on top of the field
validators. WPA3-Personal (SAE), Enhanced Open (OWE) and WPA3-Enterprise
192-bit (Suite-B) all require Protected Management Frames; a
configuration selecting any of them without ``require_pmf`` is a policy
violation even when every field is well formed.

References:
    - Wi-Fi Alliance. (2018). WPA3 Specification v1.0. Sections 2.2,
      2.3 and 3.5 (PMF required).
    - Wi-Fi Alliance. (2019). Wi-Fi CERTIFIED Enhanced Open Technical
      Specification v1.0.
    - IEEE. (2009). IEEE Std 802.11w-2009: Protected Management Frames.
"""

from __future__ import annotations

from shared.logger import WardenLogger

from warden.core.models import KeyMgmt, WifiConfiguration

logger = WardenLogger("warden.validators.policy")

PMF_REQUIRED_METHODS: dict[KeyMgmt, str] = {
    KeyMgmt.OWE: "OWE",
    KeyMgmt.SAE: "SAE",
    KeyMgmt.SUITE_B_192: "Suite-B 192-bit",
}
"""Security methods that mandate PMF, in the order they are checked."""


def check_pmf_required(config: WifiConfiguration, method: KeyMgmt) -> bool:
    """Fail when *method* is selected but PMF is not required.

    Methods outside :data:`PMF_REQUIRED_METHODS`, or not selected, pass.
    """
    if method not in PMF_REQUIRED_METHODS or not config.has_key_mgmt(method):
        return True
    if not config.require_pmf:
        logger.error(
            f"Policy violation: PMF must be enabled for "
            f"{PMF_REQUIRED_METHODS[method]} networks",
            field="require_pmf",
            value=False,
            method=method.name,
        )
        return False
    return True
