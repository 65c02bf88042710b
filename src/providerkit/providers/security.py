"""Endpoint and identifier checks for environment-supplied provider settings.

Both checks return ``None`` on rejection instead of raising, so a bad value
makes a provider unavailable rather than breaking startup.
"""

from __future__ import annotations

import ipaddress
import logging
import re
import socket
from urllib.parse import urlparse

logger = logging.getLogger("providerkit.providers")

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

_BLOCKED_HOSTNAMES = frozenset(
    {
        "localhost",
        "localhost.localdomain",
        "ip6-localhost",
        "ip6-loopback",
        "metadata.google.internal",
    }
)


def _parse_ip(hostname: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(hostname)
    except ValueError:
        pass
    # Resolvers also accept short, octal, hex and integer IPv4 forms
    # (127.1, 0x7f.0.0.1, 169.254.43518, 2130706433)
    try:
        return ipaddress.IPv4Address(socket.inet_aton(hostname))
    except (OSError, ValueError):
        return None


def _blocked_host_reason(hostname: str) -> str | None:
    host = hostname.lower().rstrip(".")
    if host in _BLOCKED_HOSTNAMES or host.endswith(".localhost"):
        return "loopback or metadata host name"

    addr = _parse_ip(host)
    if addr is None:
        return None
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped is not None:
        addr = addr.ipv4_mapped

    if addr.is_loopback:
        return "loopback address"
    if addr.is_link_local:
        return "link-local address"
    if addr.is_private or addr.is_reserved or addr.is_multicast or addr.is_unspecified:
        return "private or reserved address"
    return None


def validate_endpoint(url: str | None, *, label: str = "endpoint") -> str | None:
    """Validate a provider base URL and strip trailing slashes.

    The URL must be absolute, use ``https``, carry no credentials, query or
    fragment, and its host must not be a loopback, link-local, private or
    reserved address.

    Args:
        url: Candidate URL.
        label: Name used in log messages (usually the environment variable).

    Returns:
        The normalized endpoint, or ``None`` if the URL is rejected.
    """
    if url is None:
        return None
    candidate = url.strip()
    if not candidate:
        return None
    if any(ch.isspace() or not ch.isprintable() for ch in candidate):
        logger.warning("Ignoring %s: URL contains whitespace or control characters", label)
        return None

    try:
        parsed = urlparse(candidate)
        port = parsed.port
    except ValueError:
        logger.warning("Ignoring %s: not a valid URL", label)
        return None

    if parsed.scheme != "https":
        logger.warning("Ignoring %s: scheme must be https, got %r", label, parsed.scheme)
        return None

    hostname = parsed.hostname
    if not hostname:
        logger.warning("Ignoring %s: URL has no host", label)
        return None
    if port == 0:
        logger.warning("Ignoring %s: invalid port", label)
        return None
    if parsed.username is not None or parsed.password is not None:
        logger.warning("Ignoring %s: URL must not embed credentials", label)
        return None
    if parsed.query or parsed.fragment:
        logger.warning("Ignoring %s: URL must not have a query or fragment", label)
        return None

    reason = _blocked_host_reason(hostname)
    if reason is not None:
        logger.warning("Ignoring %s: host %s is a %s", label, hostname, reason)
        return None

    return candidate.rstrip("/")


def sanitize_identifier(raw: str | None, *, label: str = "identifier") -> str | None:
    """Return ``raw`` if it is a safe URL path segment, otherwise ``None``.

    Allowed characters are letters, digits, ``.``, ``-`` and ``_`` (at most 64).
    Names made only of dots are rejected. Empty input is silently ``None``.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    if not _IDENTIFIER_PATTERN.fullmatch(value) or not value.strip("."):
        logger.warning("Ignoring %s: %r is not a valid identifier", label, value)
        return None
    return value
