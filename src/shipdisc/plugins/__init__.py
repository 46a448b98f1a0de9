"""Hook surface for the hosting commerce platform, via pluggy.

Discovery: entry_points (pip-installed) in the ``shipdisc.plugins`` group.
INVARIANT: Plugin loading failures are warnings, never errors.
"""

from shipdisc.plugins.manager import PluginManager

__all__ = ["PluginManager"]
