"""
NetWarden Shared Module
=======================

Configuration, logging and console utilities shared by the NetWarden
validation engine and its command-line interface.
"""

from shared.config import WardenConfig, get_config

__all__ = ["WardenConfig", "get_config"]
