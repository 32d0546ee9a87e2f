# Services package init
"""
Haste Store — Services Layer
==============================

What:  Storage and asset logic, independent of HTTP.

Service Inventory:
    - KeyGenerator:   random fixed-length lowercase keys
    - KeyValueStore:  abstract backing store (memory, SQL implementations)
    - DocumentStore:  create/read document contract over a KeyValueStore
    - AssetService:   static file lookup with an optional path rewrite

Each service receives its collaborators through its constructor, so tests
build them with doubles instead of patching module globals.
"""
