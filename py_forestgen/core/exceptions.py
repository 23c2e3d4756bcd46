"""Errors raised by the forest generation pipeline."""


class ForestGenError(Exception):
    """Base class for forest generation errors."""


class ConfigurationError(ForestGenError, ValueError):
    """Generation parameters are invalid; raised before any work is done."""


class PatchPlacementExhausted(ForestGenError, RuntimeError):
    """Patch centers could not be placed within the attempt budget."""

    def __init__(self, placed: int, requested: int, attempts: int):
        self.placed = placed
        self.requested = requested
        self.attempts = attempts
        super().__init__(
            f"Placed {placed} of {requested} patches after {attempts} attempts"
        )
