"""Data models and utility functions.

This package contains:
- types: Light, Group and Config value types
- utils: Utility functions (display_width, format_table, etc.)
"""
