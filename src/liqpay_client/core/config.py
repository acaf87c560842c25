"""
Configuration objects and helpers for the gateway client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "DEFAULT_API_URL",
    "ClientConfig",
    "ConfigError",
    "load_client_config",
]

DEFAULT_API_URL = "https://www.liqpay.ua/api/request"

_PARAMETER_TO_ENV_KEY = {
    "public_key": "LIQPAY_PUBLIC_KEY",
    "private_key": "LIQPAY_PRIVATE_KEY",
    "api_url": "LIQPAY_API_URL",
    "timeout_seconds": "LIQPAY_TIMEOUT_SECONDS",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = str(value)
    return overrides


def _require(values: Mapping[str, str], env_key: str) -> str:
    value = values.get(env_key, "").strip()
    if not value:
        raise ConfigError(f"{env_key} must be provided")
    return value


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"LIQPAY_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("LIQPAY_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    """
    Credentials and endpoint for one client.

    ``timeout_seconds`` is handed to the transport unchanged; ``None`` leaves
    the transport default in place. The private key is kept out of ``repr``.
    """

    public_key: str
    private_key: str = field(repr=False)
    api_url: str = DEFAULT_API_URL
    timeout_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.public_key:
            raise ConfigError("public_key must not be empty")
        if not self.private_key:
            raise ConfigError("private_key must not be empty")
        if not self.api_url.startswith(("https://", "http://")):
            raise ConfigError(f"api_url must be an http(s) URL, got '{self.api_url}'")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        return cls(
            public_key=_require(values, "LIQPAY_PUBLIC_KEY"),
            private_key=_require(values, "LIQPAY_PRIVATE_KEY"),
            api_url=values.get("LIQPAY_API_URL", DEFAULT_API_URL).strip() or DEFAULT_API_URL,
            timeout_seconds=_parse_timeout(values.get("LIQPAY_TIMEOUT_SECONDS")),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        public_key: Optional[str] = None,
        private_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout_seconds: Optional[float | str] = None,
    ) -> "ClientConfig":
        merged_overrides = dict(overrides or {})
        merged_overrides.update(
            _collect_parameter_overrides(
                {
                    "public_key": public_key,
                    "private_key": private_key,
                    "api_url": api_url,
                    "timeout_seconds": timeout_seconds,
                }
            )
        )
        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[float | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Keyword arguments beat ``overrides``, which beat the process environment,
    which beats the ``.env`` file.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        public_key=public_key,
        private_key=private_key,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )
