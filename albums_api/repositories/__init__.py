"""
Persistence adapters.

These modules encapsulate how the catalog is stored and retrieved (today a
single JSON file). Services depend on these helpers instead of touching the
file themselves.
"""
