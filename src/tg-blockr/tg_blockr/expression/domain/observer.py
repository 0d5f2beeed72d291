"""Observer port for the expression domain — defines events in domain language."""

from typing import Protocol


class ExpressionObserver(Protocol):
    def expression_evaluation_started(self, expression: str) -> None: ...

    def expression_evaluation_completed(
        self, expression: str, rows: int, columns: int, duration_ms: int
    ) -> None: ...

    def expression_evaluation_failed(self, expression: str, reason: str) -> None: ...
