"""ImportlibExpressionEvaluator — executes load expressions by importing their functions."""

import importlib
import os
import time
from collections.abc import Callable, Mapping
from typing import Any

import pandas as pd

from tg_blockr.block.domain.expression import (
    CallExpression,
    EmptyFrameExpression,
    LoadExpression,
)
from tg_blockr.expression.domain.observer import ExpressionObserver
from tg_blockr.expression.infrastructure.errors import (
    LoaderResolutionError,
    MissingAccessTokenError,
    UnexpectedResultError,
)


class ImportlibExpressionEvaluator:
    """Satisfies the ExpressionEvaluator protocol using importlib.

    Nothing is retried: errors raised by the external loader propagate
    unchanged after being reported to the observer.
    """

    def __init__(
        self,
        observer: ExpressionObserver,
        token_env_var: str = "GITEA_TOK",
        token_gated_functions: tuple[str, ...] = ("tg_plot.get_data",),
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._observer = observer
        self._token_env_var = token_env_var
        self._token_gated = frozenset(token_gated_functions)
        self._environ = environ if environ is not None else os.environ

    def evaluate(self, expression: LoadExpression) -> pd.DataFrame:
        """
        Execute *expression* and return the loaded table.

        Raises:
            MissingAccessTokenError: if a data lake read runs without the token set.
            LoaderResolutionError: if the expression's function cannot be imported.
            UnexpectedResultError: if the loader does not return a DataFrame.
        """
        rendered = expression.render()
        self._observer.expression_evaluation_started(expression=rendered)
        started_at = time.monotonic()

        try:
            frame = self._execute(expression=expression)
        except Exception as exc:
            self._observer.expression_evaluation_failed(
                expression=rendered, reason=str(exc)
            )
            raise

        duration_ms = int((time.monotonic() - started_at) * 1000)
        self._observer.expression_evaluation_completed(
            expression=rendered,
            rows=len(frame.index),
            columns=len(frame.columns),
            duration_ms=duration_ms,
        )
        return frame

    def _execute(self, expression: LoadExpression) -> pd.DataFrame:
        if isinstance(expression, EmptyFrameExpression):
            return pd.DataFrame()

        self._check_token(expression=expression)
        function = _resolve(expression=expression)
        result: Any = function(*expression.args, **expression.kwargs)
        if not isinstance(result, pd.DataFrame):
            raise UnexpectedResultError(
                function=expression.function, result_type=type(result).__name__
            )
        return result

    def _check_token(self, expression: CallExpression) -> None:
        if expression.function not in self._token_gated:
            return
        if not self._environ.get(self._token_env_var):
            raise MissingAccessTokenError(env_var=self._token_env_var)


def _resolve(expression: CallExpression) -> Callable[..., Any]:
    """Import the module part of the dotted path and return the named callable."""
    if not expression.module_name:
        raise LoaderResolutionError(
            function=expression.function, reason="not a dotted import path"
        )
    try:
        module = importlib.import_module(expression.module_name)
    except ImportError as exc:
        raise LoaderResolutionError(function=expression.function, reason=str(exc)) from exc

    function = getattr(module, expression.attribute_name, None)
    if not callable(function):
        raise LoaderResolutionError(
            function=expression.function,
            reason=f"module '{expression.module_name}' has no callable"
            f" '{expression.attribute_name}'",
        )
    return function
