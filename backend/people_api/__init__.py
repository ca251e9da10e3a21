"""People API Package — person records over a relational store, with a GitHub-gated private area.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
