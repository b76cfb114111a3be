"""
utils/ - Shared Helpers
========================
Logging setup and inline keyboards used across handlers.
"""
