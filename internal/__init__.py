"""
Internal package.
Contains the demo bean and its capabilities.
"""
