"""
Application package initializer.

The package is organised in layers, leaf first: ``entities`` (persisted
records), ``schemas`` (wire DTOs), ``repositories`` (storage ports),
``services`` (lookup, mapping and mutation) and ``api`` (controllers and
versioned routers).  Each example resource contributes one module per
layer; the generic pieces live in the ``base`` modules.
"""

from .main import app  # noqa: F401
