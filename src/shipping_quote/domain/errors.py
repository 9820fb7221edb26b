"""
Domain errors.

The core has a single error kind. It subclasses ValueError so callers that
already handle bad arguments generically keep working.
"""


class InvalidArgument(ValueError):
    """A required argument (usually a shipping strategy) was missing."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} must not be None")
        self.argument = argument
