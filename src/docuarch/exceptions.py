"""Errors raised when a document cannot be turned into a usable graph."""


class GraphDocumentError(ValueError):
    """Base class for unusable graph input."""


class MalformedGraphDocument(GraphDocumentError):
    """Input is not a JSON object, or a plain document lacks `nodes`/`edges` lists."""


class InvalidGraphStructure(GraphDocumentError):
    """A final node lacks `id`/`label`, or an edge lacks `from`/`to`."""


class CliqueLimitExceeded(GraphDocumentError):
    """A relationship object has more members than the configured bound."""

    def __init__(self, relationship_id, member_count: int, limit: int):
        self.relationship_id = relationship_id
        self.member_count = member_count
        self.limit = limit
        super().__init__(
            f"Relationship {relationship_id!r} relates {member_count} members "
            f"(limit {limit}); would expand to "
            f"{member_count * (member_count - 1) // 2} edges"
        )
