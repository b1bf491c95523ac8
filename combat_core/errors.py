"""Domain errors raised by combat operations."""


class CombatError(Exception):
    """Base class for errors raised by the combat model."""


class InvalidOperationError(CombatError):
    """Operation not permitted given the current state of an entity.

    Raised before any mutation happens, so a caught error leaves every
    character untouched.

    Attributes:
        operation: Name of the rejected operation (e.g. ``"heal"``).
    """

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation
