"""Plugins shipped with a11yctl and registered by the CLI at startup."""
