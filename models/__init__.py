"""
models/ - Domain Layer
=======================
Immutable records for inbound updates.
"""
