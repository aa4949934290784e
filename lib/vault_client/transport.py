from __future__ import annotations

import json
import logging
from typing import Any, Callable, TypeVar

import httpx

from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    DecodeError,
    NetworkError,
    NotFoundError,
    SerializationError,
)

logger = logging.getLogger(__name__)

JSON_ENCODING = "application/json; charset=utf-8"
API_KEY_HEADER = "X-API-Key"

T = TypeVar("T")


class Transport:
    def __init__(
            self,
            cfg: ClientConfig,
            *,
            verbose: bool = False,
            transport: httpx.BaseTransport | None = None,
    ):
        base_url = cfg.effective_base_url
        if not base_url:
            raise ConfigurationError("Vault client not set up: base_url is empty")

        self._cfg = cfg
        self.verbose = verbose
        self._closed = False
        headers = {
            "User-Agent": f"vault-client/{cfg.client_version or '0.1.0'}",
            "Content-Type": JSON_ENCODING,
            "Accept": JSON_ENCODING,
        }
        if cfg.token:
            headers[API_KEY_HEADER] = cfg.token

        self._client = httpx.Client(
            base_url=base_url,
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._cfg.effective_base_url

    def close(self) -> None:
        self._closed = True
        self._client.close()

    def _log(self, msg: str, *args: Any) -> None:
        if self.verbose:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)

    def request(
            self,
            method: str,
            path: str,
            *,
            json_body: Any | None = None,
            decode: Callable[[Any], T] | None = None,
    ) -> T | None:
        """Perform one authenticated JSON exchange.

        ``json_body`` may be a model (anything with ``to_dict``), a plain
        dict/list or None for no body. ``decode`` turns the parsed response
        into the result; without it the body is discarded. An empty body
        or a JSON null is not an error and yields None.
        """
        if self._closed:
            raise ConfigurationError("Vault client not set up: transport is closed")

        content = _encode_body(json_body)

        self._log("%s %s%s", method, self.base_url, path)
        try:
            r = self._client.request(method, path, content=content)
        except httpx.RequestError as e:
            self._log("Request %s %s failed: %s", method, path, e)
            raise NetworkError(str(e)) from e

        try:
            self._log("%s %s -> %s", method, path, r.status_code)
            if r.status_code < 200 or r.status_code >= 300:
                error = _status_error(method, path, r)
                self._log("An error was returned: %s, %s", r.status_code, error.details or error)
                raise error

            if decode is None:
                return None
            raw = r.content
            if not raw.strip():
                return None
            try:
                data = json.loads(raw)
            except ValueError as e:
                raise DecodeError(f"{method} {path}: invalid JSON in response: {e}") from e
            if data is None:
                return None
            try:
                return decode(data)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise DecodeError(f"{method} {path}: unexpected response payload: {e}") from e
        finally:
            r.close()


def _encode_body(payload: Any | None) -> bytes | None:
    if payload is None:
        return None
    if hasattr(payload, "to_dict"):
        payload = payload.to_dict()
    try:
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode request body: {e}") from e


def _status_error(method: str, path: str, r: httpx.Response) -> ApiError:
    msg = f"{method} {path} failed with {r.status_code}"
    details = None
    data: Any = None
    try:
        data = r.json()
    except ValueError:
        pass

    if isinstance(data, dict):
        details = json.dumps(data, ensure_ascii=False)[:1000]
        for key in ("message", "error", "detail"):
            if data.get(key):
                msg = str(data[key])
                break
    elif r.text:
        details = r.text[:1000]

    if r.status_code in (401, 403):
        return AuthError(r.status_code, msg, details)
    if r.status_code == 404:
        return NotFoundError(r.status_code, msg, details)
    return ApiError(r.status_code, msg, details)
