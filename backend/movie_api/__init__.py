"""Movies API package: CRUD over a single movies table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
