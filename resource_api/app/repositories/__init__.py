"""
Storage ports and their implementations.

``base`` declares the contracts consumed by the service layer.
``sqlite`` stores entities in SQLite tables created by ``core.db``;
``memory`` keeps them in a dictionary and is used for tests and for the
``memory`` storage backend.
"""
