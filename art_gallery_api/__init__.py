"""
Top‑level package for the Art Gallery API.

This file makes ``art_gallery_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``art_gallery_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
