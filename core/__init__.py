"""Core functionality for the Hue CLI.

This package contains:
- bridge: HueBridge class for API interaction
- auth: Bridge discovery and username registration
- config: Loading config.toml
- errors: Exception types shown to the user
"""
