"""Catalog Admin Application Package: validated mutation pipeline for categories and products.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
