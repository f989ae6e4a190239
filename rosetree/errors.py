"""
Exceptions raised by the rose tree package.

The tree algebra itself is total; only strict lookups raise.
"""


class RoseTreeError(Exception):
    """Base class for rose tree errors."""

    pass


class NodeNotFoundError(RoseTreeError, KeyError):
    """Raised when no node carries the requested identifier."""

    def __init__(self, identifier: object) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"No node with identifier {self.identifier!r}"
