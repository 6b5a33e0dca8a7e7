"""
Service layer abstraction.

``base`` implements the create/read/update contract shared by every
resource, ``crud_service`` and ``crude_service`` add the delete or
enable/disable capability.  Resource modules only supply a
``ResourceDefinition`` with their mappings and error factories.
"""
