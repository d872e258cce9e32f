"""
Top‑level package for the Apparel Catalog API.

This file makes ``catalog_api`` a package so that modules within
``app`` can be imported using fully qualified names like
``catalog_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
