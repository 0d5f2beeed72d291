"""Structlog implementation of the BlockObserver port."""

import structlog


class StructlogBlockObserver:
    """Delegates block domain events to structlog.

    Satisfies the BlockObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def block_state_changed(self, input_id: str, state: dict[str, object]) -> None:
        self._log.debug("block.state_changed", input_id=input_id, **state)

    def block_expression_generated(self, dataset: str, expression: str) -> None:
        self._log.info(
            "block.expression_generated", dataset=dataset, expression=expression
        )
