"""
langyear Package

In-memory views and lookup queries over (year, language) records.

ARCHITECTURAL GUARANTEE:
------------------------
The core (model, queries) contains ZERO knowledge of:
    - File formats
    - Downloads or caching
    - Serialization

Loaders produce a list of Record objects.
Views are built from that list.
Queries read views and never change them.
"""

__version__ = "0.1.0"
