"""
Public, high-level helpers for talking to the payment gateway.
"""

from __future__ import annotations

from typing import Mapping, Optional

import aiohttp
import requests

from .core.client import AsyncLiqPayClient, LiqPayClient
from .core.client import send_request as _send_request
from .core.config import ClientConfig, load_client_config
from .core.contract import LiqPayRequest, ResponseT

__all__ = [
    "create_async_client",
    "create_client",
    "send_request",
]


def _resolve_config(
    config: Optional[ClientConfig],
    *,
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    public_key: Optional[str],
    private_key: Optional[str],
    api_url: Optional[str],
    timeout_seconds: Optional[float | str],
) -> ClientConfig:
    if config is not None:
        extras = (overrides, base, public_key, private_key, api_url, timeout_seconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        return config
    return load_client_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        public_key=public_key,
        private_key=private_key,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[float | str] = None,
) -> LiqPayClient:
    """
    Construct a blocking :class:`LiqPayClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from ``LIQPAY_*`` environment data.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        public_key=public_key,
        private_key=private_key,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )
    return LiqPayClient(cfg, session=session)


def create_async_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[aiohttp.ClientSession] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[float | str] = None,
) -> AsyncLiqPayClient:
    """
    Construct an :class:`AsyncLiqPayClient`; see :func:`create_client`.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        public_key=public_key,
        private_key=private_key,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )
    return AsyncLiqPayClient(cfg, session=session)


def send_request(
    request: LiqPayRequest[ResponseT],
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None,
    api_url: Optional[str] = None,
    timeout_seconds: Optional[float | str] = None,
) -> ResponseT:
    """
    Dispatch a single request with a throwaway blocking client.
    """
    cfg = _resolve_config(
        config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        public_key=public_key,
        private_key=private_key,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
    )
    return _send_request(cfg, request, session=session)
