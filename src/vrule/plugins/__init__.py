"""Extension layer — named rules contributed by pluggy plugins.

INVARIANT: Plugin failures are warnings, never errors.
"""

from vrule.plugins.hookspecs import hookimpl
from vrule.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
