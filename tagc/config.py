from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML

from .errors import ConfigError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = "tagc.yaml"

# --------------------------------------------------------------------------- #
# ДЕФОЛТЫ
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    "delimiters": {
        "block_start": "{%",
        "block_end": "%}",
        "comment_start": "{#",
        "comment_end": "#}",
    },
    "statements": {
        "disabled": [],
    },
    "lorem": {
        # None — недетерминированный источник случайности
        "seed": None,
    },
}

_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class LexerConfig:
    """Разделители тегов и комментариев."""
    block_start: str = "{%"
    block_end: str = "%}"
    comment_start: str = "{#"
    comment_end: str = "#}"

    def __post_init__(self):
        for name in ("block_start", "block_end", "comment_start", "comment_end"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"Delimiter '{name}' must be a non-empty string")
        if self.block_start == self.comment_start:
            raise ConfigError("block_start and comment_start must differ")


@dataclass(frozen=True)
class LoremConfig:
    seed: Optional[int] = None


@dataclass(frozen=True)
class TagcConfig:
    """Итоговая конфигурация компилятора шаблонов."""
    lexer: LexerConfig = field(default_factory=LexerConfig)
    disabled_statements: List[str] = field(default_factory=list)
    lorem: LoremConfig = field(default_factory=LoremConfig)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "TagcConfig":
        delimiters = _section(raw, "delimiters")
        statements = _section(raw, "statements")
        lorem = _section(raw, "lorem")

        disabled = statements.get("disabled") or []
        if not isinstance(disabled, list) or not all(isinstance(n, str) for n in disabled):
            raise ConfigError("statements.disabled must be a list of statement names")

        seed = lorem.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ConfigError(f"lorem.seed must be an integer, got {seed!r}")

        return cls(
            lexer=LexerConfig(**delimiters),
            disabled_statements=list(disabled),
            lorem=LoremConfig(seed=seed),
        )


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Секция конфига поверх своих дефолтов."""
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Config section '{key}' must be a mapping")
    section = dict(_DEFAULT_CFG[key])
    unknown = set(value) - set(section)
    if unknown:
        raise ConfigError(f"Unknown keys in '{key}': {', '.join(sorted(unknown))}")
    section.update(value)
    return section


def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Накладываем значения пользователя поверх дефолтов."""
    unknown = set(raw) - set(_DEFAULT_CFG)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    cfg = _DEFAULT_CFG.copy()
    cfg.update(raw)                      # пользовательские ключи перекрывают
    return cfg


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(path: Path) -> TagcConfig:
    """
    Загрузить tagc.yaml.

    • Если файла нет — вернуть дефолты.
    • Если schema_version отсутствует — считаем, что это актуальная версия.
    • Проверяем несовместимость схем.
    """
    if not path.exists():
        logger.debug(f"Config {path} not found, using defaults")
        return TagcConfig()

    with path.open(encoding="utf-8") as f:
        raw = _yaml.load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")

    if raw.get("schema_version", SCHEMA_VERSION) != SCHEMA_VERSION:
        raise ConfigError(
            f"Unsupported config schema {raw.get('schema_version')} "
            f"(tool expects {SCHEMA_VERSION})"
        )

    return TagcConfig.from_dict(_merge_defaults(raw))


__all__ = ["SCHEMA_VERSION", "DEFAULT_CFG_FILE", "LexerConfig", "LoremConfig", "TagcConfig", "load_config"]
