"""
Warden Validators
==================

Structural and policy validation of network configurations and network
specifiers.

Modules:
    fields         -- Leaf field validators (SSID, BSSID, secrets, selections, IP)
    policy         -- Protected Management Frames requirements
    configuration  -- Add/update configuration pipeline and sanitize phase
    specifier      -- Network specifier pipeline
"""

from warden.validators.configuration import (
    VALIDATE_FOR_ADD,
    VALIDATE_FOR_UPDATE,
    ConfigurationValidator,
    sanitize_and_validate,
    sanitize_configuration,
    validate_configuration,
)
from warden.validators.specifier import SpecifierValidator, validate_network_specifier

__all__ = [
    "VALIDATE_FOR_ADD",
    "VALIDATE_FOR_UPDATE",
    "ConfigurationValidator",
    "SpecifierValidator",
    "sanitize_and_validate",
    "sanitize_configuration",
    "validate_configuration",
    "validate_network_specifier",
]
