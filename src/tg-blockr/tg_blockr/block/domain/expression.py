"""LoadExpression — a deferred, unexecuted description of how to load a dataset."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class EmptyFrameExpression(BaseModel, frozen=True):
    """Evaluates to an empty table; produced while no dataset is selected."""

    kind: Literal["empty"] = "empty"

    def render(self) -> str:
        return "pandas.DataFrame()"


class CallExpression(BaseModel, frozen=True):
    """A call of ``function`` (dotted import path) with positional and keyword arguments."""

    kind: Literal["call"] = "call"
    function: str = Field(min_length=1)
    args: tuple[str, ...] = ()
    kwargs: dict[str, bool] = Field(default_factory=dict)

    @property
    def module_name(self) -> str:
        return self.function.rpartition(".")[0]

    @property
    def attribute_name(self) -> str:
        return self.function.rpartition(".")[2]

    def render(self) -> str:
        """Return the call as Python source, e.g. ``tg_plot.get_data('abfall_menge_art')``."""
        parts = [repr(arg) for arg in self.args]
        parts.extend(f"{key}={value!r}" for key, value in self.kwargs.items())
        return f"{self.function}({', '.join(parts)})"


# Pydantic selects the subtype from the `kind` field.
type LoadExpression = Annotated[
    EmptyFrameExpression | CallExpression,
    Field(discriminator="kind"),
]
