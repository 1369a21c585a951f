"""
Warden Comparators
===================

Change detection between a saved and an incoming configuration, and
status-first ordering of saved networks.

Modules:
    changes   -- Credential, IP, proxy and MAC-randomization change detectors
    priority  -- Status comparator with pluggable tie-break strategies
"""

from warden.comparators.changes import (
    has_credential_changed,
    has_enterprise_config_changed,
    has_ip_changed,
    has_mac_randomization_changed,
    has_proxy_changed,
    is_same_network,
)
from warden.comparators.priority import (
    NetworkStatusComparator,
    by_association_count,
    by_last_connected,
    sort_networks,
)

__all__ = [
    "has_credential_changed",
    "has_enterprise_config_changed",
    "has_ip_changed",
    "has_mac_randomization_changed",
    "has_proxy_changed",
    "is_same_network",
    "NetworkStatusComparator",
    "by_association_count",
    "by_last_connected",
    "sort_networks",
]
