"""Infrastructure Layer — database access, logging and in-process caches.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures leave this layer as StorageError
"""
