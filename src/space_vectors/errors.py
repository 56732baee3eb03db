"""Custom exception hierarchy for the space-vectors calculator."""


class SpaceVectorsError(Exception):
    """Base exception for all space-vectors errors."""


class ParseError(SpaceVectorsError):
    """Raised when an expression does not match the grammar."""


class DispatchError(SpaceVectorsError):
    """Raised when a generic operation has no method for a kind combination."""

    def __init__(self, function: str, kinds: tuple[str, ...]) -> None:
        self.function = function
        self.kinds = kinds
        super().__init__(
            f"No method found for {function} with input types: {', '.join(kinds)}"
        )


class ConfigError(SpaceVectorsError):
    """Raised when a configuration file cannot be read or validated."""


class DegeneracyError(SpaceVectorsError):
    """Raised when a degeneracy warning is promoted to an error by policy."""


class EvaluationError(SpaceVectorsError):
    """Raised when arithmetic fails while evaluating an expression."""
