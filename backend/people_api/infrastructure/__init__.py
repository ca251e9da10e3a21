"""Infrastructure Layer — database engine, OAuth2 provider client, and logging setup.

Invariants:
    - Infrastructure never imports from api/
    - All external failures mapped to core/errors.py types
"""
