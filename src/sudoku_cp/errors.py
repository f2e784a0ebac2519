"""Error types shared by the parser, the event log and the CLI."""

from __future__ import annotations

from typing import Optional


class FormatError(ValueError):
    """Raised when grid text does not normalise to exactly 81 cells.

    A malformed grid is a caller bug rather than a property of the puzzle, so
    it is reported as an exception and never as a search contradiction.
    """

    def __init__(self, length: int, text: Optional[str] = None) -> None:
        self.length = length
        self.text = text
        super().__init__(f"grid must contain 81 cells after normalisation, got {length}")


class EventValidationError(ValueError):
    """Raised when a solve event does not match its JSON Schema."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


__all__ = ["EventValidationError", "FormatError"]
