import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "ARITH_"

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _as_bool(value: str) -> bool:
    return value.strip().lower() in TRUTHY_VALUES


@dataclass
class Settings:
    prompt: str = ">> "
    quit_command: str = "quit"
    show_tokens: bool = False
    show_ast: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Defaults overridden by ARITH_* environment variables"""
        if environ is None:
            environ = os.environ
        settings = cls()
        if f"{ENV_PREFIX}PROMPT" in environ:
            settings.prompt = environ[f"{ENV_PREFIX}PROMPT"]
        if f"{ENV_PREFIX}QUIT_COMMAND" in environ:
            settings.quit_command = environ[f"{ENV_PREFIX}QUIT_COMMAND"].strip()
        if f"{ENV_PREFIX}SHOW_TOKENS" in environ:
            settings.show_tokens = _as_bool(environ[f"{ENV_PREFIX}SHOW_TOKENS"])
        if f"{ENV_PREFIX}SHOW_AST" in environ:
            settings.show_ast = _as_bool(environ[f"{ENV_PREFIX}SHOW_AST"])
        if f"{ENV_PREFIX}LOG_LEVEL" in environ:
            settings.log_level = environ[f"{ENV_PREFIX}LOG_LEVEL"].strip().upper()
        return settings
