"""Base exception class for all tg-blockr-specific errors."""


class TgBlockrError(Exception):
    """Base class for all tg-blockr errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
