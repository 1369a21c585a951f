"""
Warden Core
============

Domain models, shared decoding routines and the engine facade of the
NetWarden validation engine.
"""

from warden.core.engine import WardenEngine
from warden.core.mac import MacAddress, MacAddressType
from warden.core.models import (
    AuthAlgorithm,
    BssidPattern,
    EnterpriseConfig,
    GroupCipher,
    GroupMgmtCipher,
    IpAssignment,
    IpConfiguration,
    KeyMgmt,
    MacRandomization,
    NetworkSpecifier,
    PairwiseCipher,
    PatternMatcher,
    PatternType,
    PnoNetwork,
    Protocol,
    ProxySettings,
    SelectionStatus,
    SuiteBCipher,
    ValidationOutcome,
    WifiConfiguration,
)

__all__ = [
    "WardenEngine",
    "MacAddress",
    "MacAddressType",
    "AuthAlgorithm",
    "BssidPattern",
    "EnterpriseConfig",
    "GroupCipher",
    "GroupMgmtCipher",
    "IpAssignment",
    "IpConfiguration",
    "KeyMgmt",
    "MacRandomization",
    "NetworkSpecifier",
    "PairwiseCipher",
    "PatternMatcher",
    "PatternType",
    "PnoNetwork",
    "Protocol",
    "ProxySettings",
    "SelectionStatus",
    "SuiteBCipher",
    "ValidationOutcome",
    "WifiConfiguration",
]
