"""Configuration for desktop-entry-filter.

The only persistent configuration is the optional settings.conf file that
controls logging. Processing rules (allowed keys, denied media types) are
fixed constants, see desktop_entry_filter.constants.
"""

from desktop_entry_filter.config.paths import Paths
from desktop_entry_filter.config.settings import Settings, SettingsManager

__all__ = ["Paths", "Settings", "SettingsManager"]
