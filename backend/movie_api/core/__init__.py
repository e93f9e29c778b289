"""Core Layer: domain errors shared by the API and infrastructure layers.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
"""
