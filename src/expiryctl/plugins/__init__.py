"""Extension layer — notification providers via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: A failing provider is a failed send, never a crashed check.
"""

from expiryctl.plugins.manager import PluginManager

__all__ = ["PluginManager"]
