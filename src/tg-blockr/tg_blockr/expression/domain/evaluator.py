"""ExpressionEvaluator Protocol — structural interface for executing load expressions."""

from typing import Protocol

import pandas as pd

from tg_blockr.block.domain.expression import LoadExpression


class ExpressionEvaluator(Protocol):
    """Executes a LoadExpression and returns the loaded table."""

    def evaluate(self, expression: LoadExpression) -> pd.DataFrame: ...
