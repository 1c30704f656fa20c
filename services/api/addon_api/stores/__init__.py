"""Data stores.

Stores handle:
- Manual add-on mappings (in memory, process lifetime)

No resolution logic in stores - that belongs in services.
"""
