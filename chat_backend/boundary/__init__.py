"""
Boundary layer for external system integrations.

Handles interactions with the session database.
"""
