from __future__ import annotations

import dataclasses
import pathlib
import typing

from starlette.config import Config as BaseConfig
from starlette.config import Environ

from cookiekit.context import DEFAULT_SCOPE_KEY

__all__ = ["Config", "CookieSettings"]


class Config(BaseConfig):
    """Environment backed configuration that also reads any number of .env files.

    Missing env files are skipped, values from later files override earlier ones."""

    def __init__(
        self,
        env_files: list[str | pathlib.Path] | None = None,
        env_prefix: str = "",
        environ: typing.Mapping[str, str] | None = None,
    ) -> None:
        env_files = env_files or []
        super().__init__(None, Environ() if environ is None else environ, env_prefix)
        for env_file in map(pathlib.Path, env_files):
            if env_file.is_file():
                self.file_values.update(self._read_file(env_file))


@dataclasses.dataclass(frozen=True)
class CookieSettings:
    scope_key: str = DEFAULT_SCOPE_KEY
    log_directives: bool = False

    @classmethod
    def from_config(
        cls, config: Config | None = None, env_files: list[str | pathlib.Path] | None = None
    ) -> CookieSettings:
        """Read COOKIEKIT_ prefixed settings from the environment and `env_files`."""
        config = config or Config(env_files=env_files, env_prefix="COOKIEKIT_")
        return cls(
            scope_key=config("SCOPE_KEY", cast=str, default=DEFAULT_SCOPE_KEY),
            log_directives=config("LOG_DIRECTIVES", cast=bool, default=False),
        )
