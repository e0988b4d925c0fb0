"""Repositories — SQL statements against the store, one class per table.

Invariants:
    - Every statement is parameterized (SQLAlchemy bound parameters, no string SQL with values)
    - Repositories never commit implicitly; services decide when a unit of work ends
"""
