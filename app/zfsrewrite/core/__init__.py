"""Core infrastructure for zfsrewrite: paths and user settings."""
