"""POST helpers on top of httpx.AsyncClient.

Usage:
    async with create_client() as client:
        ok = await execute_post(client, "/orders", order, on_error=print)
        receipt = await post_as(client, "/orders", order, Receipt)

Failures never raise: execute_post returns False and post_as returns None,
after passing a description of the failure to ``on_error``.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import Any

import httpx
from pydantic import ValidationError

from objext.config import HttpSettings
from objext.serialization.codec import from_json, to_json

log = getLogger(__name__)

SuccessHook = Callable[[httpx.Response], Awaitable[None]]
ErrorHook = Callable[[str], None]

_JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}


def create_client(settings: HttpSettings | None = None, **kwargs: Any) -> httpx.AsyncClient:
    """Create an AsyncClient configured from HttpSettings.

    Args:
        settings: Timeout and base URL. Defaults to environment-loaded settings.
        **kwargs: Extra arguments forwarded to httpx.AsyncClient.

    Returns:
        New client; the caller owns and closes it.
    """
    settings = settings or HttpSettings()
    kwargs.setdefault("timeout", settings.timeout)
    kwargs.setdefault("base_url", settings.base_url)
    return httpx.AsyncClient(**kwargs)


async def _send(client: httpx.AsyncClient, url: str, request_data: Any) -> httpx.Response:
    if request_data is None:
        return await client.post(url)
    content = to_json(request_data).encode("utf-8")
    return await client.post(url, content=content, headers=_JSON_HEADERS)


def _report(on_error: ErrorHook | None, message: str) -> None:
    log.warning(message)
    if on_error is not None:
        on_error(message)


async def execute_post(
    client: httpx.AsyncClient,
    url: str,
    request_data: Any = None,
    on_success: SuccessHook | None = None,
    on_error: ErrorHook | None = None,
) -> bool:
    """POST request_data as JSON and report the outcome.

    Args:
        client: Client used to send the request.
        url: Request URL (relative URLs resolve against the client's base_url).
        request_data: Body serialized with to_json; None sends an empty body.
        on_success: Awaited with the response on a 2xx status.
        on_error: Called with a failure description otherwise.

    Returns:
        True on a 2xx status. False on any other status, on a transport error,
        on a body that cannot be serialized, or when on_success raises.
    """
    try:
        response = await _send(client, url, request_data)
        if response.is_success:
            if on_success is not None:
                await on_success(response)
            return True
    except Exception as e:  # noqa: BLE001
        _report(on_error, str(e))
        return False

    _report(
        on_error,
        f"Request {url} failed. Error: {response.text}, "
        f"StatusCode: {response.status_code}, Reason: {response.reason_phrase}",
    )
    return False


async def post_as[T](
    client: httpx.AsyncClient,
    url: str,
    request_data: Any,
    response_type: type[T],
    on_error: ErrorHook | None = None,
) -> T | None:
    """POST request_data as JSON and deserialize the response body.

    Args:
        client: Client used to send the request.
        url: Request URL.
        request_data: Body serialized with to_json; None sends an empty body.
        response_type: Type the response body is deserialized into.
        on_error: Called with a failure description on any failure.

    Returns:
        Deserialized response on a 2xx status, None otherwise.
    """
    try:
        response = await _send(client, url, request_data)
    except Exception as e:  # noqa: BLE001
        _report(on_error, str(e))
        return None

    if not response.is_success:
        _report(
            on_error,
            f"Request {url} failed. StatusCode: {response.status_code}, "
            f"Reason: {response.reason_phrase}, Error: {response.text}",
        )
        return None

    try:
        return from_json(response.text, response_type)
    except (json.JSONDecodeError, ValidationError) as e:
        _report(on_error, f"Request {url} returned an unreadable body: {e}")
        return None
