# config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import click
from dotenv import load_dotenv

POSTGRES_URL_ENV = "POSTGRES_URL"
READ_ONLY_ENV = "POSTGRES_READ_ONLY"


def parse_read_only(value: Optional[str]) -> bool:
    """
    Resolve the read-only flag from its raw environment value.
    Unset or empty means read-only. Anything that is not "true"/"false"
    is reported and treated as read-only so writes stay blocked.
    """
    if not value:
        return True
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    click.echo(
        f'Unrecognized {READ_ONLY_ENV} value "{value}". Defaulting to read-only.',
        err=True,
    )
    return True


@dataclass(frozen=True)
class Settings:
    db_url: Optional[str] = None
    read_only: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Settings":
        return cls(
            db_url=environ.get(POSTGRES_URL_ENV) or None,
            read_only=parse_read_only(environ.get(READ_ONLY_ENV)),
        )


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings once. With no mapping given, .env in the working directory is loaded into os.environ first."""
    if environ is None:
        load_dotenv(Path.cwd() / ".env")
        environ = os.environ
    return Settings.from_env(environ)
