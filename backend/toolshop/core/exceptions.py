"""
Domain exceptions raised by the store, repositories and services.

Routers translate these into HTTP errors; nothing below the API layer
knows about status codes.
"""


class ToolshopError(Exception):
    """Base class for every error raised by the toolshop core"""


class NotFoundError(ToolshopError, LookupError):
    """A record referenced by id does not exist in its collection"""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class InvalidMobileNumberError(ToolshopError, ValueError):
    """Customer login attempted with a mobile number that fails the pattern check"""

    def __init__(self, mobile: str):
        self.mobile = mobile
        super().__init__("Please enter a valid mobile number")


class HierarchyCycleError(ToolshopError, ValueError):
    """Re-parenting would make a node its own ancestor, or the data already loops"""

    def __init__(self, node_id, parent_id=None):
        self.node_id = node_id
        self.parent_id = parent_id
        if parent_id is None:
            message = f"Parent cycle detected at node {node_id}"
        else:
            message = f"Moving {node_id} under {parent_id} would create a cycle"
        super().__init__(message)


class InvalidParentError(ToolshopError, ValueError):
    """A parent_id references a record that does not exist"""

    def __init__(self, entity: str, parent_id):
        self.entity = entity
        self.parent_id = parent_id
        super().__init__(f"Parent {entity} not found: {parent_id}")
