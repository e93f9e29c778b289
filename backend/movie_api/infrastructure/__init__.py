"""Infrastructure Layer: database access, schema bootstrap, and logging.

Invariants:
    - Infrastructure never produces HTTP semantics (status codes belong to api/)
"""
