"""Error types raised by the stratified design engine.

Both derive from ValueError: every failure comes from caller input.
"""


class ConstructionError(ValueError):
    """Plot data cannot form a design (duplicate ids, mixed plot areas)."""


class DomainError(ValueError):
    """A mutation or query is invalid for the current design."""
