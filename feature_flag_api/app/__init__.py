"""
Application package initializer.

The service is split into ``core`` (configuration, logging, errors),
``schemas`` (request and response models), ``services`` (the flag
store) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
