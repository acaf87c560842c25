"""
Blocking and awaitable HTTP clients for the gateway.

Both clients share :func:`build_form_data` for the encode-and-sign step and
differ only in how the single POST is performed. There are no retries: one
``send`` is one HTTP exchange.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Generator, Generic, Optional, Tuple, cast

import aiohttp
import requests
from pydantic import ValidationError

from .config import ClientConfig
from .contract import Contract, LiqPayRequest, LiqPayResponse, ResponseT, contract_for
from .errors import DecodeError, DispatchCancelledError, TransportError
from .signing import build_form_data

__all__ = [
    "AsyncLiqPayClient",
    "LiqPayClient",
    "PendingDispatch",
    "send_request",
]


def _prepare(config: ClientConfig, request: LiqPayRequest) -> Tuple[Contract, Dict[str, str]]:
    """Fill in the configured public key if the request has none, then sign it."""
    contract = contract_for(request)
    if "public_key" in type(request).model_fields and request.public_key is None:
        request = request.model_copy(update={"public_key": config.public_key})
    form = build_form_data(config.private_key, request)
    logging.info("Dispatching %s to %s", contract.request_type.__name__, config.api_url)
    return contract, form


def _decode_response(contract: Contract, status_code: int, body: bytes) -> LiqPayResponse:
    try:
        decoded = contract.response_type.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            f"Gateway responded with {status_code}; body does not decode into "
            f"{contract.response_type.__name__}: {exc}",
            status_code=status_code,
            body=body.decode("utf-8", errors="replace"),
        ) from exc
    logging.debug(
        "Decoded %s (HTTP %s)", contract.response_type.__name__, status_code
    )
    return decoded


class LiqPayClient:
    """
    Blocking client. The credential is fixed for the client's lifetime, so one
    instance may be shared between threads.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self._owns_session = session is None

    def send(self, request: LiqPayRequest[ResponseT]) -> ResponseT:
        """
        Sign ``request``, POST it and decode the bound response type.

        A request without ``public_key`` is sent with the configured one.
        Raises :class:`SerializationError`, :class:`TransportError` or
        :class:`DecodeError`. A declined payment is a normal response.
        """
        contract, form = _prepare(self.config, request)
        try:
            response = self.session.post(
                self.config.api_url,
                data=form,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise TransportError(
                f"Failed to reach gateway at {self.config.api_url}: {exc}"
            ) from exc
        finally:
            form.clear()
        decoded = _decode_response(contract, response.status_code, response.content)
        return cast(ResponseT, decoded)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "LiqPayClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class PendingDispatch(Generic[ResponseT]):
    """
    A signed request returned by :meth:`AsyncLiqPayClient.send`.

    Awaiting it performs the HTTP exchange, at most once. The signed form is
    cleared when the exchange ends, or by :meth:`discard` when the dispatch is
    abandoned before being awaited.
    """

    def __init__(
        self, client: "AsyncLiqPayClient", contract: Contract, form: Dict[str, str]
    ) -> None:
        self._client = client
        self._contract = contract
        self._form = form
        self._started = False

    @property
    def request_type(self) -> type:
        return self._contract.request_type

    @property
    def signed(self) -> bool:
        """Whether the signed form is still held, i.e. not yet sent or discarded."""
        return bool(self._form)

    def discard(self) -> None:
        self._form.clear()

    def __await__(self) -> Generator[Any, None, ResponseT]:
        if self._started or not self._form:
            raise RuntimeError(
                f"{self.request_type.__name__} dispatch was already awaited or discarded"
            )
        self._started = True
        exchange = self._client._exchange(self._contract, self._form)
        decoded = yield from exchange.__await__()
        return cast(ResponseT, decoded)


class AsyncLiqPayClient:
    """
    Awaitable client backed by :mod:`aiohttp`.

    ``send`` encodes and signs immediately and returns an awaitable that
    suspends only for the HTTP exchange. Independently issued sends carry no
    ordering guarantee.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.config = config
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        # created lazily so it binds to the running loop
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    def send(self, request: LiqPayRequest[ResponseT]) -> "PendingDispatch[ResponseT]":
        """
        Sign ``request`` now and return the pending exchange.

        A :class:`SerializationError` is raised here, before anything is
        awaited. Awaiting the result raises :class:`TransportError`,
        :class:`DecodeError`, or :class:`DispatchCancelledError` when it is
        cancelled mid-exchange.

        The signed form lives in the returned :class:`PendingDispatch` until
        it is awaited. A dispatch that will never be awaited should be
        dropped with :meth:`PendingDispatch.discard`.
        """
        contract, form = _prepare(self.config, request)
        return PendingDispatch(self, contract, form)

    async def _exchange(self, contract: Contract, form: Dict[str, str]) -> LiqPayResponse:
        options: Dict[str, Any] = {}
        if self.config.timeout_seconds is not None:
            options["timeout"] = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
        try:
            async with self.session.post(self.config.api_url, data=form, **options) as response:
                status_code = response.status
                body = await response.read()
        except asyncio.CancelledError as exc:
            raise DispatchCancelledError(contract.request_type) from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(
                f"Failed to reach gateway at {self.config.api_url}: {exc!r}"
            ) from exc
        finally:
            form.clear()
        return _decode_response(contract, status_code, body)

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()

    async def __aenter__(self) -> "AsyncLiqPayClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


def send_request(
    config: ClientConfig,
    request: LiqPayRequest[ResponseT],
    *,
    session: Optional[requests.Session] = None,
) -> ResponseT:
    """
    One-shot blocking dispatch with a throwaway client.
    """
    with LiqPayClient(config, session=session) as client:
        return client.send(request)
