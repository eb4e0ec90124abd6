"""Filesystem access for desktop-entry-filter."""
