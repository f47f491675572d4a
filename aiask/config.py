from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping
import os

from .errors import ConfigError

REQUIRED = ("AI_ASK_BASE_URL", "AI_ASK_API_KEY", "AI_ASK_MODEL")
DEFAULT_SHELL = "sh"
DEFAULT_LOG_LEVEL = "WARNING"

@dataclass
class Settings:
    base_url: str
    api_key: str
    model: str
    shell: str = DEFAULT_SHELL
    log_level: str = DEFAULT_LOG_LEVEL

    def __repr__(self) -> str:
        # keep the key out of tracebacks and debug logs
        return (f"Settings(base_url={self.base_url!r}, model={self.model!r}, "
                f"shell={self.shell!r}, log_level={self.log_level!r})")

def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "")
    if not value:
        raise ConfigError(f"{name} is not set")
    return value

def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read the process environment once; everything downstream gets values, not os.environ."""
    env = os.environ if environ is None else environ
    base_url, api_key, model = (_require(env, name) for name in REQUIRED)
    return Settings(
        base_url=base_url,
        api_key=api_key,
        model=model,
        shell=env.get("SHELL") or DEFAULT_SHELL,
        log_level=env.get("AI_ASK_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
    )
