"""
API package containing the generic controllers and versioned routes.

``controller`` holds the CRUD/CRUDE controllers that turn a service into
an ``APIRouter``.  Version subpackages such as ``v1`` expose a top-level
``router`` which includes all resource routers.
"""
