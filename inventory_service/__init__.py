"""Inventory Service Package: HTTP API for inventory items with photo storage.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
