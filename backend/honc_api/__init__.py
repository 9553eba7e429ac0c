"""Honc Users API — users CRUD and voice-agent webhook normalization.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
