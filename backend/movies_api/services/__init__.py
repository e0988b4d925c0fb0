"""Service Layer — collection operations orchestrating core rules and repositories.

Invariants:
    - Services raise MoviesApiError subclasses only; routes never catch them
"""
