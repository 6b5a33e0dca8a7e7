"""
Endpoint subpackage for API v1.

Each module wires one resource: it chooses the storage port, builds the
service provider used as a FastAPI dependency and exposes the
controller's ``router``.  The routers are aggregated in ``router.py``.
"""
