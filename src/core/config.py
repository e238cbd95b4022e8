"""Runtime settings, read from environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping, Self

IN_MEMORY_DATABASE_URL = "sqlite://"


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    use_in_memory_database: bool = True
    database_url: str = "sqlite:///./gamehub.db"
    sql_echo: bool = False
    log_level: str = "INFO"
    default_page_size: int = 10

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build settings from GAMEHUB_* variables. Missing variables fall back to the defaults above."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            use_in_memory_database=_as_bool(
                env.get("GAMEHUB_USE_IN_MEMORY_DATABASE", str(defaults.use_in_memory_database))
            ),
            database_url=env.get("GAMEHUB_DATABASE_URL", defaults.database_url),
            sql_echo=_as_bool(env.get("GAMEHUB_SQL_ECHO", str(defaults.sql_echo))),
            log_level=env.get("GAMEHUB_LOG_LEVEL", defaults.log_level).upper(),
            default_page_size=int(
                env.get("GAMEHUB_DEFAULT_PAGE_SIZE", defaults.default_page_size)
            ),
        )

    @property
    def effective_database_url(self) -> str:
        if self.use_in_memory_database:
            return IN_MEMORY_DATABASE_URL
        return self.database_url
