"""
Custom exception types for the drill parsing pipeline.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class CoordinateDecodeError(ValueError):
    """A numeric field could not be read as a number."""

    def __init__(self, token: str, message: str = "not a number", line: int | None = None):
        self.token = token
        self.original_message = message
        self.line = line  # source line of the block, set once known
        super().__init__(f"Coordinate Decode Error: {token!r}: {message}")

    def __str__(self):
        return f"Coordinate Decode Error: {self.token!r}: {self.original_message}"
