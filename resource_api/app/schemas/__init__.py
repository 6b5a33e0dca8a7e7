"""
Pydantic schema definitions for API payloads.

Each resource defines its DTO here.  DTOs are the boundary objects of
the API and are kept separate from the persisted entities in
``entities``.  ``base`` also defines the structured error payload.
"""
