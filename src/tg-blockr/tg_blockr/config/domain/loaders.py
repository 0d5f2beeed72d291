"""Loader configuration model — where the external loading functions live."""

from pydantic import BaseModel, Field


class LoaderConfig(BaseModel, frozen=True):
    """Names the two external loading functions and the fetch namespace to scan.

    ``fetch_function`` is called with ``add_labels``/``validate`` keywords;
    ``cache_function`` reads the data lake and needs ``token_env_var`` set
    when it is evaluated.
    """

    fetch_function: str = Field(default="tg_data.get_dataset", min_length=1)
    cache_function: str = Field(default="tg_plot.get_data", min_length=1)
    fetch_namespace: str = Field(default="tg_data", min_length=1)
    fetch_prefix: str = Field(default="fetch_", min_length=1)
    denylist: tuple[str, ...] = ("json",)
    token_env_var: str = Field(default="GITEA_TOK", min_length=1)
