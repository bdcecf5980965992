from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_PROGRAM = "curl"


def load_env() -> None:
    # Search upward from the working directory, not the installed package.
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)


@dataclass(frozen=True)
class CommandSettings:
    program: str = DEFAULT_PROGRAM

    def __post_init__(self) -> None:
        if not self.program or any(ch.isspace() for ch in self.program):
            raise ValueError(f"program must be a single non-empty word: {self.program!r}")

    @property
    def prefix(self) -> str:
        return self.program + " "


def load_settings() -> CommandSettings:
    load_env()
    return CommandSettings(
        program=(os.getenv("CURLLITE_PROGRAM") or DEFAULT_PROGRAM).strip() or DEFAULT_PROGRAM,
    )
