"""Tests for ImportlibExpressionEvaluator — executing load expressions."""

import pandas as pd
import pytest

from tg_blockr.block.domain.expression import CallExpression, EmptyFrameExpression
from tg_blockr.expression.infrastructure.errors import (
    LoaderResolutionError,
    MissingAccessTokenError,
    UnexpectedResultError,
)
from tg_blockr.expression.infrastructure.importlib_evaluator import (
    ImportlibExpressionEvaluator,
)
from tests.expression.fake_observer import FakeExpressionObserver
from tests.fake_loaders import tg_data, tg_plot

_CACHE = "tests.fake_loaders.tg_plot.get_data"
_FETCH = "tests.fake_loaders.tg_data.get_dataset"


def _evaluator(
    observer: FakeExpressionObserver | None = None,
    environ: dict[str, str] | None = None,
) -> ImportlibExpressionEvaluator:
    return ImportlibExpressionEvaluator(
        observer=observer or FakeExpressionObserver(),
        token_env_var="GITEA_TOK",
        token_gated_functions=(_CACHE,),
        environ={"GITEA_TOK": "secret"} if environ is None else environ,
    )


@pytest.fixture(autouse=True)
def _reset_fake_loaders() -> None:
    tg_data.calls.clear()
    tg_plot.calls.clear()


class TestEmptyFrame:
    """An empty-frame expression never touches a loader."""

    def test_returns_empty_dataframe(self) -> None:
        frame = _evaluator().evaluate(EmptyFrameExpression())

        assert isinstance(frame, pd.DataFrame)
        assert frame.empty

    def test_does_not_call_loaders(self) -> None:
        _evaluator(environ={}).evaluate(EmptyFrameExpression())

        assert tg_data.calls == []
        assert tg_plot.calls == []


class TestCacheRead:
    """Data lake reads need the access token when they run."""

    def test_calls_cache_function_with_dataset_id(self) -> None:
        frame = _evaluator().evaluate(
            CallExpression(function=_CACHE, args=("heizsysteme",))
        )

        assert tg_plot.calls == ["heizsysteme"]
        assert list(frame["dataset"]) == ["heizsysteme"]

    def test_missing_token_raises(self) -> None:
        with pytest.raises(MissingAccessTokenError):
            _evaluator(environ={}).evaluate(
                CallExpression(function=_CACHE, args=("heizsysteme",))
            )

        assert tg_plot.calls == []

    def test_empty_token_raises(self) -> None:
        with pytest.raises(MissingAccessTokenError):
            _evaluator(environ={"GITEA_TOK": ""}).evaluate(
                CallExpression(function=_CACHE, args=("heizsysteme",))
            )

    def test_missing_token_is_reported(self) -> None:
        observer = FakeExpressionObserver()

        with pytest.raises(MissingAccessTokenError):
            _evaluator(observer=observer, environ={}).evaluate(
                CallExpression(function=_CACHE, args=("heizsysteme",))
            )

        assert observer.failed[0].expression == f"{_CACHE}('heizsysteme')"
        assert "GITEA_TOK" in observer.failed[0].reason


class TestDirectFetch:
    """Direct fetches pass the flags through and need no token."""

    def test_passes_keyword_flags(self) -> None:
        _evaluator(environ={}).evaluate(
            CallExpression(
                function=_FETCH,
                args=("energie_emiss_co2",),
                kwargs={"add_labels": False, "validate": True},
            )
        )

        assert tg_data.calls == [
            {"dataset_id": "energie_emiss_co2", "add_labels": False, "validate": True}
        ]

    def test_emits_completed_with_shape(self) -> None:
        observer = FakeExpressionObserver()

        _evaluator(observer=observer).evaluate(
            CallExpression(
                function=_FETCH,
                args=("energie_emiss_co2",),
                kwargs={"add_labels": True, "validate": True},
            )
        )

        assert observer.completed[0].rows == 2
        assert observer.completed[0].columns == 5

    def test_loader_errors_propagate_unchanged(self) -> None:
        observer = FakeExpressionObserver()

        with pytest.raises(RuntimeError, match="validation failed"):
            _evaluator(observer=observer).evaluate(
                CallExpression(
                    function="tests.fake_loaders.tg_data.fail_dataset",
                    args=("heizsysteme",),
                )
            )

        assert len(observer.failed) == 1


class TestResolution:
    """Unresolvable functions and non-table results raise TgBlockrErrors."""

    def test_missing_module_raises(self) -> None:
        with pytest.raises(LoaderResolutionError):
            _evaluator().evaluate(CallExpression(function="no_such_tg_module.get_data"))

    def test_missing_attribute_raises(self) -> None:
        with pytest.raises(LoaderResolutionError) as exc_info:
            _evaluator().evaluate(
                CallExpression(function="tests.fake_loaders.tg_data.get_nothing")
            )

        assert "get_nothing" in str(exc_info.value)

    def test_undotted_function_raises(self) -> None:
        with pytest.raises(LoaderResolutionError):
            _evaluator().evaluate(CallExpression(function="get_dataset"))

    def test_non_dataframe_result_raises(self) -> None:
        with pytest.raises(UnexpectedResultError):
            _evaluator().evaluate(
                CallExpression(
                    function="tests.fake_loaders.tg_data.get_raw", args=("heizsysteme",)
                )
            )
