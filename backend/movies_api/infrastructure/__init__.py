"""Infrastructure Layer — database pool, logging setup, host introspection.

Invariants:
    - Everything here does IO; core/ never imports from this package
"""
