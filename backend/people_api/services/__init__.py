"""Services Layer — store-backed implementations of the core boundary protocols.

Invariants:
    - Every implementation maps its library's failures onto core/errors.py
"""
