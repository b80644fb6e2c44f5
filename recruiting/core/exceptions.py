"""
Domain exceptions raised below the web layer.

Routes never catch these directly: `recruiting.main` registers a handler
that turns them into HTTP responses.
"""


class EntityNotFoundError(LookupError):
    """A mutation targeted an aggregate that does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' not found")
