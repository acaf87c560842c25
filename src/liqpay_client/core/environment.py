"""
Sources of ``LIQPAY_*`` settings for :class:`ClientConfig`.

Three layers feed the client configuration, highest precedence first:

1. explicit overrides (keyword arguments of :func:`load_client_config` are
   folded into this layer);
2. the base mapping, normally the process environment;
3. a ``.env`` file, read only to fill keys the other layers leave unset.

Only keys starting with ``LIQPAY_`` survive the merge, so unrelated process
secrets never reach a :class:`GatewayEnvironment`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional

__all__ = ["ENV_PREFIX", "GatewayEnvironment", "build_environment", "load_env_file"]

ENV_PREFIX = "LIQPAY_"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _parse_env_file(path: Path) -> Dict[str, str]:
    # KEY=VALUE lines; "export " prefixes, comments and blank lines allowed
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = _unquote(value.strip())
    return values


def _gateway_keys(values: Mapping[str, str]) -> Dict[str, str]:
    return {key: value for key, value in values.items() if key.startswith(ENV_PREFIX)}


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Copy the ``LIQPAY_*`` entries of ``path`` into ``environ`` (default
    :data:`os.environ`) and return the resulting ``LIQPAY_*`` settings.

    Keys already present in ``environ`` win over the file.
    """
    target: MutableMapping[str, str] = environ if environ is not None else os.environ
    for key, value in _gateway_keys(_parse_env_file(Path(path))).items():
        target.setdefault(key, value)
    return _gateway_keys(target)


@dataclass(frozen=True)
class GatewayEnvironment:
    """Merged ``LIQPAY_*`` settings, read by :meth:`ClientConfig.from_mapping`."""

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> GatewayEnvironment:
    """
    Merge the three layers described above into one :class:`GatewayEnvironment`.

    ``base`` defaults to :data:`os.environ`; pass ``{}`` to ignore it. Pass
    ``env_file=None`` to skip the file.
    """
    merged = _gateway_keys(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _gateway_keys(_parse_env_file(Path(env_file))).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(_gateway_keys(overrides))

    return GatewayEnvironment(variables=merged)
