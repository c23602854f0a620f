"""
Top‑level package for the TR Bot API.

This file makes ``tr_bot_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``tr_bot_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
