"""
Utility functions for inflation adjustment.

This package contains configuration, validation and visualization
helpers shared by the CLI and the core.
"""
