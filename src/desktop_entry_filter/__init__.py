"""Top-level package for desktop-entry-filter.

License: GPL-3.0
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("desktop-entry-filter")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
