"""
Warden -- Wireless Configuration Validator
===========================================

Validation and comparison engine for wireless network configurations.
Warden decides whether a configuration (or a network specifier) may be
admitted, detects which parts of a saved configuration an update
changes, and derives the periodic-scan shortlist.

Modules:
    core.engine       -- Engine facade
    core.models       -- Pydantic domain models
    core.encoding     -- Quoted / hex string decoding
    core.mac          -- MAC address value type
    core.security     -- Security type classification
    core.pno          -- Periodic-scan filter entries
    validators        -- Field validators, PMF policy, pipelines
    comparators       -- Change detectors and network priority
    output            -- Console output
    cli               -- Click-based command-line interface

References:
    - IEEE. (2020). IEEE Std 802.11-2020: Wireless LAN MAC and PHY
      Specifications.
    - Wi-Fi Alliance. (2018). WPA3 Specification v1.0.
"""

__version__ = "1.0.0"
__tool__ = "Warden"
__description__ = "Wireless Configuration Validator"
