"""
Top-level package for the Resource API.

The framework lives in ``app``: generic storage ports, services and
controllers for CRUD and CRUDE resources, plus two example resources
(``clubs`` and ``instances``) that wire the whole stack together.
Import it with fully qualified names such as ``resource_api.app.main``.
"""

__all__ = []
