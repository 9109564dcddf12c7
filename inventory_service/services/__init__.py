"""Services Layer: domain operations that coordinate the record store and blob store.

Invariants:
    - Services hold no state between requests
    - Services raise InventoryError subclasses; the API layer maps them to HTTP
"""
