"""BlockObserver port — domain events emitted while a TG Data block reacts to input."""

from typing import Protocol


class BlockObserver(Protocol):
    """Observer port for block domain events.

    Implementations may log to structlog or record for tests.
    """

    def block_state_changed(self, input_id: str, state: dict[str, object]) -> None: ...

    def block_expression_generated(self, dataset: str, expression: str) -> None: ...
