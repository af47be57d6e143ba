"""
Top‑level package for the Codeython practice API.

This file makes ``codeython_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``codeython_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
