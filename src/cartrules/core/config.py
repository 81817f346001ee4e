"""Single config object: passed when creating the app; available via DI."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Any, Mapping

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def parse_bool(value: Any) -> bool:
    """bool or 'true'/'false'/'1'/'0'/'yes'/'no'/'on'/'off' -> bool."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _default_rules() -> list[str]:
    return ["vip", "holiday"]


@dataclass
class Config:
    """
    Application config. Pass to Application(config=...); then available via container.resolve(Config).
    rules: discount rule names in precedence order.
    """

    rules: list[str] = field(default_factory=_default_rules)
    log_level: str = "INFO"
    log_json: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def load_from_env(
        cls,
        prefix: str = "CARTRULES_",
        environ: Mapping[str, str] | None = None,
        **defaults: Any,
    ) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns raw strings keyed by lowercased name."""
        env = os.environ if environ is None else environ
        result = dict(defaults)
        for key, value in env.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result

    @classmethod
    def from_env(cls, prefix: str = "CARTRULES_", environ: Mapping[str, str] | None = None) -> Config:
        """Typed config from env: CARTRULES_RULES=vip,holiday, CARTRULES_PORT=8000, ... Unknown keys ignored."""
        raw = cls.load_from_env(prefix, environ)
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for name, value in raw.items():
            if name not in known:
                continue
            if name == "rules":
                kwargs[name] = [p.strip().lower() for p in value.split(",") if p.strip()]
            elif name == "port":
                try:
                    kwargs[name] = int(value)
                except ValueError as e:
                    raise ValueError(f"{prefix}PORT must be an integer, got {value!r}") from e
            elif name == "log_json":
                kwargs[name] = parse_bool(value)
            else:
                kwargs[name] = value.strip()
        return cls(**kwargs)
