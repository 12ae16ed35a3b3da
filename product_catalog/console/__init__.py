"""
==============================================================================
Console Package
==============================================================================

Presentation layer: colored rendering and the interactive session.

Modules:
--------
- formatter: ConsoleFormatter for rows, listings and messages
- session: ConsoleSession prompt loop

==============================================================================
"""

from .formatter import ConsoleFormatter
from .session import ConsoleSession

__all__ = [
    "ConsoleFormatter",
    "ConsoleSession",
]
