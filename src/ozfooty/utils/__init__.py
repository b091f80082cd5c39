"""
Shared helpers for OzFooty (logging and file paths).
"""
