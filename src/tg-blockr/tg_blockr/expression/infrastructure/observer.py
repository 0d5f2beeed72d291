"""Structlog implementation of the ExpressionObserver port."""

import structlog


class StructlogExpressionObserver:
    """Logs one started event and one completed or failed event per evaluation."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def expression_evaluation_started(self, expression: str) -> None:
        self._log.info("expression.evaluation_started", expression=expression)

    def expression_evaluation_completed(
        self, expression: str, rows: int, columns: int, duration_ms: int
    ) -> None:
        self._log.info(
            "expression.evaluation_completed",
            expression=expression,
            rows=rows,
            columns=columns,
            duration_ms=duration_ms,
        )

    def expression_evaluation_failed(self, expression: str, reason: str) -> None:
        self._log.error(
            "expression.evaluation_failed", expression=expression, reason=reason
        )
