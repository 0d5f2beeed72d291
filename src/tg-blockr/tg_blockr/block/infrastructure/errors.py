"""Error types raised while handling TG Data block input."""

from tg_blockr.core.errors import TgBlockrError


class UnknownInputError(TgBlockrError):
    """Raised when an input-change event names an input the block does not have."""

    def __init__(self, input_id: str) -> None:
        self.input_id = input_id
        super().__init__(f"Failed to handle input: unknown input id '{input_id}'")


class InvalidInputValueError(TgBlockrError):
    """Raised when an input value cannot be coerced to the input's type."""

    def __init__(self, input_id: str, reason: str) -> None:
        self.input_id = input_id
        super().__init__(f"Failed to handle input '{input_id}': {reason}")
