from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

import httpx

from .errors import TransportError
from .logging import get_logger

logger = get_logger(__name__)


DEFAULT_USER_AGENT = "datapoint-client/0.1 (+https://www.metoffice.gov.uk/services/data/datapoint)"


class KeySupplier(Protocol):
    def get(self) -> str:
        """Return the API key to use for the next request."""


@dataclass(frozen=True)
class StaticKey:
    """A key that never changes for the life of the client."""

    value: str

    def get(self) -> str:
        return self.value


@dataclass(frozen=True)
class FetchResult:
    body: bytes
    url: str
    status_code: int


def join_url(base_url: str, suffix: str) -> str:
    return base_url.rstrip("/") + "/" + suffix.lstrip("/")


class DataPointFetcher:
    """Performs single authenticated GET requests against the DataPoint service.

    No retries and no caching: each call sends exactly one request and either
    returns the full body or raises :class:`TransportError`. The status code is
    recorded but never acted upon, callers judge a response by its payload.
    """

    def __init__(
        self,
        key_supplier: KeySupplier,
        *,
        base_url: str,
        client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        self.key_supplier = key_supplier
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        )

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def fetch(
        self,
        description: str,
        suffix: str,
        params: Optional[Mapping[str, str]] = None,
    ) -> FetchResult:
        try:
            target = httpx.URL(join_url(self.base_url, suffix))
        except httpx.InvalidURL as exc:
            raise TransportError(
                f"failed to generate {description} url: {exc}",
                description=description,
                url="???",
            ) from exc

        query = {"key": self.key_supplier.get()}
        if params:
            query.update(params)

        url = str(target)
        logger.debug("datapoint.fetch", description=description, url=url)
        try:
            with self.client.stream("GET", target, params=query) as response:
                try:
                    body = response.read()
                except httpx.HTTPError as exc:
                    logger.warning("datapoint.fetch.read_failure", description=description, url=url, error=str(exc))
                    raise TransportError(
                        f"failed to read body from response from {url} for {description}: {exc}",
                        description=description,
                        url=url,
                    ) from exc
                status_code = response.status_code
        except httpx.HTTPError as exc:
            logger.warning("datapoint.fetch.failure", description=description, url=url, error=str(exc))
            raise TransportError(
                f"failed to query {url} for {description}: {exc}",
                description=description,
                url=url,
            ) from exc

        logger.debug("datapoint.fetch.complete", description=description, url=url, status_code=status_code)
        return FetchResult(body=body, url=url, status_code=status_code)
