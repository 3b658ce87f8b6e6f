"""Infrastructure Layer: database, resource store, view cache, image storage, logging.

Invariants:
    - Implements the Protocols in core/repository_protocols.py
    - The only layer that imports SQLAlchemy engines or touches the filesystem
"""
