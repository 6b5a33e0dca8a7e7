"""
Persisted record shapes.

Entities are plain dataclasses.  ``BaseEntity`` carries the identifier
assigned by the storage port; ``NonRemovableEntity`` adds the
``enabled`` flag used by CRUDE resources.
"""
