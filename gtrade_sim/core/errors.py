"""Error types shared across the package."""


class InvalidInput(ValueError):
    """Trade parameter violates a precondition (non-positive price or leverage, bad direction)."""


class NotFound(LookupError):
    """Referenced pair, order or position does not exist."""
