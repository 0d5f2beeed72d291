"""Tests verifying the TgBlockrError type hierarchy."""

from pathlib import Path

import pytest

from tg_blockr.block.infrastructure.errors import InvalidInputValueError, UnknownInputError
from tg_blockr.catalog.infrastructure.errors import (
    DuplicateDatasetError,
    UnknownDatasetError,
)
from tg_blockr.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from tg_blockr.core.errors import TgBlockrError
from tg_blockr.expression.infrastructure.errors import (
    LoaderResolutionError,
    MissingAccessTokenError,
    UnexpectedResultError,
)

_ERRORS: list[TgBlockrError] = [
    MissingEnvVarsError(missing_vars=["GITEA_TOK"]),
    ConfigValidationError(reason="bad value"),
    ConfigLoadError(path=Path("/some/config.yaml")),
    UnknownDatasetError(dataset_id="nope"),
    DuplicateDatasetError(dataset_ids=["energie_emiss_co2"]),
    UnknownInputError(input_id="colour"),
    InvalidInputValueError(input_id="validate", reason="not a bool"),
    LoaderResolutionError(function="tg_data.get_dataset", reason="no module"),
    MissingAccessTokenError(env_var="GITEA_TOK"),
    UnexpectedResultError(function="tg_plot.get_data", result_type="list"),
]


class TestTgBlockrErrorHierarchy:
    """All tg-blockr-specific exceptions inherit from TgBlockrError."""

    @pytest.mark.parametrize("error", _ERRORS, ids=lambda e: type(e).__name__)
    def test_is_tg_blockr_error(self, error: TgBlockrError) -> None:
        assert isinstance(error, TgBlockrError)

    @pytest.mark.parametrize("error", _ERRORS, ids=lambda e: type(e).__name__)
    def test_message_starts_with_failed(self, error: TgBlockrError) -> None:
        assert str(error).startswith("Failed to ")

    @pytest.mark.parametrize("error", _ERRORS, ids=lambda e: type(e).__name__)
    def test_is_not_retriable(self, error: TgBlockrError) -> None:
        assert error.retriable is False

    def test_tg_blockr_error_is_exception(self) -> None:
        assert isinstance(TgBlockrError("test"), Exception)

    def test_missing_access_token_names_the_variable(self) -> None:
        assert "GITEA_TOK" in str(MissingAccessTokenError(env_var="GITEA_TOK"))
