"""Header parsing utilities for URL shortener."""

from typing import Dict, Mapping, Optional


FORWARDED_HEADERS = {
    "x-forwarded-proto": "forwarded_proto",
    "x-forwarded-host": "forwarded_host",
    "x-forwarded-for": "forwarded_for",
}


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Pick the X-Forwarded-* values set by a reverse proxy.

    Header names are matched case-insensitively.

    Args:
        headers: Request headers

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for
    """
    found: Dict[str, Optional[str]] = {key: None for key in FORWARDED_HEADERS.values()}
    for name, value in headers.items():
        key = FORWARDED_HEADERS.get(name.lower())
        if key and value:
            # Proxies may append; the first hop is the client-facing one
            found[key] = value.split(",")[0].strip()
    return found


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Work out the scheme://host[:port] that short links should point at.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + Host header
    3. Configured base URL

    Args:
        headers: Request headers
        fallback_base_url: Base URL from configuration
        request_scheme: Request scheme (http/https)
        request_host: Value of the Host header

    Returns:
        Base URL without trailing slash
    """
    forwarded = extract_forwarded_headers(headers)
    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        return f"{forwarded['forwarded_proto']}://{forwarded['forwarded_host']}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")
