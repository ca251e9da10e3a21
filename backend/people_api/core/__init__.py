"""Core Layer — domain types, error hierarchy, and boundary protocols. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
