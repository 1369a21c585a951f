"""
Warden Core Data Models
========================

Pydantic-based domain models for the NetWarden validation engine:
network configurations, enterprise (802.1X) credentials, network
specifiers and periodic-scan filter entries.

Multi-valued security selections (key management, protocols, auth
algorithms and the four cipher families) are modelled as sets of
integer indices into a closed :class:`enum.IntEnum`. Keeping the raw
indices lets a malformed selection (an index past the end of its enum)
survive model construction so the validators can reject it with a
precise diagnostic instead of a generic parse error.

References:
    - IEEE. (2020). IEEE Std 802.11-2020. Section 12: Security.
    - Wi-Fi Alliance. (2018). WPA3 Specification v1.0.
    - IETF. (2004). RFC 3748: Extensible Authentication Protocol (EAP).
    - Pydantic v2 Documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum
from ipaddress import IPv4Address, IPv4Interface, IPv6Address, IPv6Interface
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from warden.core.mac import MacAddress


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PASSWORD_MASK = "*"
"""Placeholder a caller echoes back for a secret it did not change."""

BSSID_ANY = "any"
"""Wildcard BSSID token that clears a BSSID restriction."""

INVALID_NETWORK_ID = -1
UNKNOWN_CARRIER_ID = -1
WEP_KEY_SLOTS = 4


# ---------------------------------------------------------------------------
# Security selection enumerations (index == value)
# ---------------------------------------------------------------------------


class KeyMgmt(enum.IntEnum):
    """Key management (security method) selections.

    Reference:
        IEEE. (2020). IEEE Std 802.11-2020. Table 9-151: AKM suite
        selectors.
    """

    NONE = 0
    WPA_PSK = 1
    WPA_EAP = 2
    IEEE8021X = 3
    WPA2_PSK = 4
    OSEN = 5
    FT_PSK = 6
    FT_EAP = 7
    SAE = 8
    OWE = 9
    SUITE_B_192 = 10
    WPA_PSK_SHA256 = 11
    WPA_EAP_SHA256 = 12
    WAPI_PSK = 13
    WAPI_CERT = 14


class Protocol(enum.IntEnum):
    WPA = 0
    RSN = 1
    OSEN = 2
    WAPI = 3


class AuthAlgorithm(enum.IntEnum):
    OPEN = 0
    SHARED = 1
    LEAP = 2
    SAE = 3


class GroupCipher(enum.IntEnum):
    WEP40 = 0
    WEP104 = 1
    TKIP = 2
    CCMP = 3
    GTK_NOT_USED = 4
    GCMP_256 = 5
    SMS4 = 6


class PairwiseCipher(enum.IntEnum):
    NONE = 0
    TKIP = 1
    CCMP = 2
    GCMP_256 = 3
    SMS4 = 4


class GroupMgmtCipher(enum.IntEnum):
    BIP_CMAC_256 = 0
    BIP_GMAC_128 = 1
    BIP_GMAC_256 = 2


class SuiteBCipher(enum.IntEnum):
    ECDHE_ECDSA = 0
    ECDHE_RSA = 1


BITSET_FIELDS: dict[str, type[enum.IntEnum]] = {
    "allowed_key_management": KeyMgmt,
    "allowed_protocols": Protocol,
    "allowed_auth_algorithms": AuthAlgorithm,
    "allowed_group_ciphers": GroupCipher,
    "allowed_pairwise_ciphers": PairwiseCipher,
    "allowed_group_management_ciphers": GroupMgmtCipher,
    "allowed_suite_b_ciphers": SuiteBCipher,
}
"""Every multi-valued selection field and the enum bounding its indices."""


# ---------------------------------------------------------------------------
# IP, proxy, randomization and selection-status enumerations
# ---------------------------------------------------------------------------


class IpAssignment(str, enum.Enum):
    STATIC = "STATIC"
    DHCP = "DHCP"
    UNASSIGNED = "UNASSIGNED"


class ProxySettings(str, enum.Enum):
    NONE = "NONE"
    STATIC = "STATIC"
    UNASSIGNED = "UNASSIGNED"
    PAC = "PAC"


class MacRandomization(enum.IntEnum):
    """Per-network MAC randomization mode; AUTO is the default."""

    NONE = 0
    PERSISTENT = 1
    NON_PERSISTENT = 2
    AUTO = 3


class SelectionStatus(str, enum.Enum):
    """Network selection status as tracked by the configuration store."""

    ENABLED = "ENABLED"
    TEMPORARILY_DISABLED = "TEMPORARILY_DISABLED"
    PERMANENTLY_DISABLED = "PERMANENTLY_DISABLED"


# ---------------------------------------------------------------------------
# Enterprise (802.1X) enumerations
# ---------------------------------------------------------------------------


class EapMethod(enum.IntEnum):
    """Outer EAP method.

    Reference:
        IETF. (2004). RFC 3748. Section 5: Initial EAP Request/Response
        Types.
    """

    NONE = -1
    PEAP = 0
    TLS = 1
    TTLS = 2
    PWD = 3
    SIM = 4
    AKA = 5
    AKA_PRIME = 6
    UNAUTH_TLS = 7
    WAPI_CERT = 8


class Phase2Method(enum.IntEnum):
    NONE = 0
    PAP = 1
    MSCHAP = 2
    MSCHAPV2 = 3
    GTC = 4
    SIM = 5
    AKA = 6
    AKA_PRIME = 7


class OcspMode(enum.IntEnum):
    NONE = 0
    REQUEST_CERT_STATUS = 1
    REQUIRE_CERT_STATUS = 2
    REQUIRE_ALL_NON_TRUSTED_CERTS_STATUS = 3


_SIM_EAP_METHODS = frozenset({EapMethod.SIM, EapMethod.AKA, EapMethod.AKA_PRIME})
_SIM_PHASE2_METHODS = frozenset(
    {Phase2Method.SIM, Phase2Method.AKA, Phase2Method.AKA_PRIME}
)


# ---------------------------------------------------------------------------
# IP and proxy configuration
# ---------------------------------------------------------------------------


class StaticIpConfiguration(BaseModel):
    """Static addressing parameters.

    Attributes:
        ip_address: Interface address with prefix length (``192.0.2.10/24``).
        gateway: Default gateway address.
        dns_servers: Ordered DNS server addresses.
        domains: Search domains, space separated.
    """

    ip_address: Optional[Union[IPv4Interface, IPv6Interface]] = None
    gateway: Optional[Union[IPv4Address, IPv6Address]] = None
    dns_servers: list[Union[IPv4Address, IPv6Address]] = Field(default_factory=list)
    domains: Optional[str] = None


class IpConfiguration(BaseModel):
    ip_assignment: IpAssignment = IpAssignment.DHCP
    static_ip_configuration: Optional[StaticIpConfiguration] = None


class ProxyInfo(BaseModel):
    host: Optional[str] = None
    port: Optional[int] = Field(default=None, ge=0, le=65535)
    exclusion_list: list[str] = Field(default_factory=list)
    pac_file_url: Optional[str] = None


# ---------------------------------------------------------------------------
# Enterprise credential
# ---------------------------------------------------------------------------


class EnterpriseConfig(BaseModel):
    """802.1X / EAP credential block of an enterprise network.

    Certificates are carried as PEM text; NetWarden only compares them.

    Attributes:
        eap_method: Outer EAP method.
        phase2_method: Inner (tunnelled) authentication method.
        sim_num: SIM slot count as a decimal string, ``None`` when unset.
        identity: Outer identity.
        anonymous_identity: Identity sent before the tunnel is up.
        password: EAP password.
        ca_certificates: Trusted CA certificates (PEM).
        ca_certificate_aliases: Aliases of CA certificates in the key store.
        client_certificate_alias: Alias of the client certificate.
        alt_subject_match: Required subjectAltName of the server certificate.
        ocsp: Certificate status checking mode.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    eap_method: EapMethod = EapMethod.NONE
    phase2_method: Phase2Method = Phase2Method.NONE
    sim_num: Optional[str] = Field(default=None, pattern=r"^\d*$")
    identity: Optional[str] = None
    anonymous_identity: Optional[str] = None
    password: Optional[str] = None
    ca_certificates: Optional[list[str]] = None
    ca_certificate_aliases: Optional[list[str]] = None
    client_certificate_alias: Optional[str] = None
    alt_subject_match: Optional[str] = None
    ocsp: OcspMode = OcspMode.NONE

    @property
    def is_authentication_sim_based(self) -> bool:
        """True when the SIM card itself is the credential."""
        if self.eap_method in _SIM_EAP_METHODS:
            return True
        return (
            self.eap_method == EapMethod.PEAP
            and self.phase2_method in _SIM_PHASE2_METHODS
        )


# ---------------------------------------------------------------------------
# Network configuration
# ---------------------------------------------------------------------------


class WifiConfiguration(BaseModel):
    """A saved or proposed wireless network configuration.

    On an update, a caller may submit a partial configuration: ``None``
    SSID / pre-shared key / WEP keys mean "not being changed", and a
    secret equal to :data:`PASSWORD_MASK` means "echoed back unchanged".

    Attributes:
        network_id: Identifier assigned by the configuration store.
        ssid: Quoted UTF-8 (``"name"``) or hex SSID.
        bssid: Optional BSSID restriction, or ``"any"``.
        allowed_key_management: Selected security methods (:class:`KeyMgmt`).
        allowed_protocols: Selected protocols (:class:`Protocol`).
        allowed_auth_algorithms: Selected 802.11 auth algorithms.
        allowed_pairwise_ciphers: Selected pairwise ciphers.
        allowed_group_ciphers: Selected group ciphers.
        allowed_group_management_ciphers: Selected group management ciphers.
        allowed_suite_b_ciphers: Selected Suite-B ciphers.
        pre_shared_key: PSK / SAE password, quoted ASCII or 64 hex digits.
        wep_keys: WEP key slots (entries may be ``None``).
        wep_tx_key_index: Index of the active WEP key.
        hidden_ssid: Whether the network does not broadcast its SSID.
        require_pmf: Whether protected management frames are mandatory.
        carrier_id: Carrier the network belongs to, ``-1`` when none.
        enterprise_config: 802.1X credential block.
        ip_configuration: Address assignment.
        proxy_settings: Proxy mode.
        http_proxy: Proxy parameters.
        mac_randomization: MAC randomization mode.
        selection_status: Network selection status.
        priority: Caller-assigned priority.
        last_connected: Epoch milliseconds of the last connection.
        num_association: Number of successful associations.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    network_id: int = INVALID_NETWORK_ID
    ssid: Optional[str] = None
    bssid: Optional[str] = None

    allowed_key_management: set[int] = Field(default_factory=set)
    allowed_protocols: set[int] = Field(default_factory=set)
    allowed_auth_algorithms: set[int] = Field(default_factory=set)
    allowed_pairwise_ciphers: set[int] = Field(default_factory=set)
    allowed_group_ciphers: set[int] = Field(default_factory=set)
    allowed_group_management_ciphers: set[int] = Field(default_factory=set)
    allowed_suite_b_ciphers: set[int] = Field(default_factory=set)

    pre_shared_key: Optional[str] = None
    wep_keys: Optional[list[Optional[str]]] = Field(
        default_factory=lambda: [None] * WEP_KEY_SLOTS
    )
    wep_tx_key_index: int = 0
    hidden_ssid: bool = False
    require_pmf: bool = False
    carrier_id: int = UNKNOWN_CARRIER_ID
    enterprise_config: Optional[EnterpriseConfig] = None

    ip_configuration: Optional[IpConfiguration] = Field(default_factory=IpConfiguration)
    proxy_settings: ProxySettings = ProxySettings.NONE
    http_proxy: Optional[ProxyInfo] = None
    mac_randomization: MacRandomization = MacRandomization.AUTO

    selection_status: SelectionStatus = SelectionStatus.ENABLED
    priority: int = 0
    last_connected: int = 0
    num_association: int = 0

    @field_validator(*BITSET_FIELDS, mode="before")
    @classmethod
    def _coerce_selection(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept enum member names (``"WPA_PSK"``) alongside indices."""
        if v is None or isinstance(v, (str, bytes)):
            return v
        enum_cls = BITSET_FIELDS[info.field_name]
        coerced = []
        for item in v:
            if isinstance(item, str) and not item.lstrip("-").isdigit():
                try:
                    item = enum_cls[item.upper()].value
                except KeyError as exc:
                    raise ValueError(
                        f"unknown {enum_cls.__name__} member {item!r}"
                    ) from exc
            coerced.append(item)
        return coerced

    @property
    def needs_pre_shared_key(self) -> bool:
        """True when a selected security method consumes a pre-shared key."""
        return bool(
            self.allowed_key_management
            & {KeyMgmt.WPA_PSK, KeyMgmt.SAE, KeyMgmt.WAPI_PSK}
        )

    def has_key_mgmt(self, method: KeyMgmt) -> bool:
        return method in self.allowed_key_management


class ValidationOutcome(BaseModel):
    """Result of the sanitize-then-validate pipeline.

    Attributes:
        configuration: Sanitized copy of the submitted configuration.
        valid: Whether the submitted configuration passed validation.
    """

    configuration: WifiConfiguration
    valid: bool


# ---------------------------------------------------------------------------
# Network specifier
# ---------------------------------------------------------------------------


class PatternType(str, enum.Enum):
    LITERAL = "LITERAL"
    PREFIX = "PREFIX"


class PatternMatcher(BaseModel):
    """SSID pattern: an exact literal or a prefix."""

    path: Optional[str] = None
    type: PatternType = PatternType.LITERAL

    def match(self, value: str) -> bool:
        if self.path is None:
            return False
        if self.type == PatternType.PREFIX:
            return value.startswith(self.path)
        return value == self.path


class BssidPattern(BaseModel):
    """BSSID pattern: a base address and a mask of significant bits."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    base: Optional[MacAddress] = None
    mask: Optional[MacAddress] = None

    @field_validator("base", "mask", mode="before")
    @classmethod
    def _parse_address(cls, v: Any) -> Any:
        if isinstance(v, str):
            return MacAddress.from_string(v)
        return v

    @field_serializer("base", "mask")
    def _format_address(self, v: Optional[MacAddress]) -> Optional[str]:
        return None if v is None else str(v)

    def as_pair(self) -> tuple[Optional[MacAddress], Optional[MacAddress]]:
        return (self.base, self.mask)


class NetworkSpecifier(BaseModel):
    """A pattern describing a class of acceptable networks.

    Attributes:
        ssid_pattern: SSID literal or prefix pattern.
        bssid_pattern: BSSID base/mask pattern.
        wifi_configuration: Security constraints the network must meet.
    """

    ssid_pattern: Optional[PatternMatcher] = None
    bssid_pattern: Optional[BssidPattern] = None
    wifi_configuration: WifiConfiguration = Field(default_factory=WifiConfiguration)


# ---------------------------------------------------------------------------
# Periodic network offload (PNO) scan filter entry
# ---------------------------------------------------------------------------


class PnoFlag(enum.IntFlag):
    DIRECTED_SCAN = 1 << 0
    A_BAND = 1 << 1
    G_BAND = 1 << 2


class PnoAuthCode(enum.IntFlag):
    OPEN = 1 << 0
    PSK = 1 << 1
    EAPOL = 1 << 2


class PnoNetwork(BaseModel):
    """One network for the firmware to watch for during offloaded scans."""

    ssid: Optional[str] = None
    flags: int = 0
    auth_bit_field: int = 0

    def has_flag(self, flag: PnoFlag) -> bool:
        return bool(self.flags & flag)

    def has_auth(self, code: PnoAuthCode) -> bool:
        return bool(self.auth_bit_field & code)
