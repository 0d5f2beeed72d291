"""Error types raised while evaluating load expressions."""

from tg_blockr.core.errors import TgBlockrError


class LoaderResolutionError(TgBlockrError):
    """Raised when an expression's function cannot be imported."""

    def __init__(self, function: str, reason: str) -> None:
        self.function = function
        super().__init__(f"Failed to resolve loader '{function}': {reason}")


class MissingAccessTokenError(TgBlockrError):
    """Raised when a data lake read is evaluated without the access token set."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(
            f"Failed to read from data lake: environment variable {env_var} is not set"
        )


class UnexpectedResultError(TgBlockrError):
    """Raised when a loader returns something other than a table."""

    def __init__(self, function: str, result_type: str) -> None:
        super().__init__(
            f"Failed to load dataset: '{function}' returned {result_type},"
            " expected a pandas DataFrame"
        )
