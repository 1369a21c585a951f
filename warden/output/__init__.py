"""
Warden Output
==============

Output generation for the NetWarden command-line interface.

Modules:
    console  -- Rich-based console display
"""

from warden.output.console import WardenConsoleOutput

__all__ = ["WardenConsoleOutput"]
