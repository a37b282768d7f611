"""
Top-level package for the Feature Flag Service.

All functionality lives in submodules under ``app``; the ASGI
application is importable as ``feature_flag_api.app.main:app``.
"""

__all__ = []
