from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional


MACRO_EXPANSION_MODES = ("single", "expand")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Defaults
_DEFAULT_PROMPT = "Linsl> "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_REPL_HOST = "127.0.0.1"
_DEFAULT_REPL_PORT = 8765


@dataclass(frozen=True)
class Settings:
    macro_expansion: str = "single"
    prompt: str = _DEFAULT_PROMPT
    log_level: str = _DEFAULT_LOG_LEVEL
    repl_host: str = _DEFAULT_REPL_HOST
    repl_port: int = _DEFAULT_REPL_PORT

    @property
    def expand_macros(self) -> bool:
        return self.macro_expansion == "expand"


def _choice(environ: Mapping[str, str], var: str, default: str, choices: tuple[str, ...]) -> str:
    raw = environ.get(var)
    if not raw:
        return default
    value = raw.strip()
    if var == "LINSL_LOG_LEVEL":
        value = value.upper()
    if value not in choices:
        raise ValueError(f"{var} must be one of {', '.join(choices)}, got {raw!r}")
    return value


def _port(environ: Mapping[str, str], var: str, default: int) -> int:
    raw = environ.get(var)
    if not raw:
        return default
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"{var} must be between 1 and 65535, got {port}")
    return port


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from LINSL_* environment variables."""
    if environ is None:
        environ = os.environ
    return Settings(
        macro_expansion=_choice(environ, "LINSL_MACRO_EXPANSION", "single", MACRO_EXPANSION_MODES),
        prompt=environ.get("LINSL_PROMPT", _DEFAULT_PROMPT),
        log_level=_choice(environ, "LINSL_LOG_LEVEL", _DEFAULT_LOG_LEVEL, LOG_LEVELS),
        repl_host=environ.get("LINSL_REPL_HOST") or _DEFAULT_REPL_HOST,
        repl_port=_port(environ, "LINSL_REPL_PORT", _DEFAULT_REPL_PORT),
    )
