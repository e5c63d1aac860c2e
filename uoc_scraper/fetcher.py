"""
HTTP fetching of the unit of competency details page.

A single synchronous GET through httpx. There is no retry: any failure is
reported once and the run aborts.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .config import FetchConfig
from .errors import NetworkError


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The response body text, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None


def build_url(code: str, base_url: str) -> str:
    """Append the unit code to the details page prefix."""
    return f"{base_url}{code}"


def fetch_url(
    url: str,
    timeout: float,
    trust_env: bool = True,
    follow_redirects: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> FetchResult:
    """Fetch a URL using httpx.

    Non-2xx responses are reported as errors while keeping the status code.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        trust_env: Whether to respect system proxy settings from environment
        follow_redirects: Whether to follow HTTP redirects
        transport: Optional transport override, used by tests

    Returns:
        FetchResult with text on success or error message on failure
    """
    try:
        with httpx.Client(
            timeout=timeout,
            follow_redirects=follow_redirects,
            trust_env=trust_env,
            transport=transport,
        ) as client:
            resp = client.get(url)
            resp.raise_for_status()
            return FetchResult(url=url, status_code=resp.status_code, text=resp.text, error=None)
    except httpx.HTTPStatusError as exc:
        return FetchResult(
            url=url,
            status_code=exc.response.status_code,
            text=None,
            error=f"HTTP {exc.response.status_code}",
        )
    except httpx.HTTPError as exc:
        return FetchResult(url=url, status_code=None, text=None, error=f"{type(exc).__name__}: {exc}")


def fetch_unit_page(
    code: str,
    cfg: FetchConfig,
    transport: httpx.BaseTransport | None = None,
) -> str:
    """Fetch the details page for a unit code.

    Raises:
        NetworkError: If the request did not complete with a success status
    """
    url = build_url(code, cfg.base_url)
    result = fetch_url(
        url,
        timeout=cfg.timeout_seconds,
        trust_env=cfg.trust_env,
        follow_redirects=cfg.follow_redirects,
        transport=transport,
    )
    if result.error is not None or result.text is None:
        raise NetworkError(
            f"Failed to fetch {url}: {result.error}",
            url=url,
            status_code=result.status_code,
        )
    return result.text
