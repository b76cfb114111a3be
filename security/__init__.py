"""
security/ - Access Control
===========================
Administrator checks for privileged commands.
"""
