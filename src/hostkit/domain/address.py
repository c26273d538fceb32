"""Endpoint parsing for ``host[:port]`` connection strings.

Accepted shapes:
- ``name`` / ``1.2.3.4`` — default port
- ``name:port`` / ``1.2.3.4:port``
- ``::1`` / ``fe80::200:5aee:feaa:20a2`` — bare IPv6 literal, default port
- ``[::1]:port`` — bracketed IPv6 literal, port required

INVARIANT: A successful parse never yields a port outside 1..65535, and
re-parsing ``canonical_address`` yields an equal :class:`Endpoint`.

Parsing is pure. Malformed input is returned as a :class:`ParseError`
value, never raised.
"""

from __future__ import annotations

import logging
import string
from enum import StrEnum

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

MIN_PORT = 1
MAX_PORT = 65535

# A full IPv6 literal has 8 groups, hence 7 separators.
MAX_IPV6_COLONS = 7
_IPV6_GROUP_DIGITS = 4
_HEX_DIGITS = frozenset(string.hexdigits)
_DECIMAL_DIGITS = frozenset(string.digits)


class ParseErrorCode(StrEnum):
    """Distinct reasons an address can be rejected."""

    NO_HOST = "NO_HOST"
    BAD_PORT = "BAD_PORT"
    PORT_OUT_OF_RANGE = "PORT_OUT_OF_RANGE"
    UNTERMINATED_BRACKET = "UNTERMINATED_BRACKET"
    MISSING_PORT = "MISSING_PORT"
    TRAILING_GARBAGE = "TRAILING_GARBAGE"
    BAD_IPV6 = "BAD_IPV6"
    BAD_HOST = "BAD_HOST"


class Endpoint(BaseModel):
    """A validated ``(host, port)`` pair with its canonical string form."""

    model_config = {"frozen": True}

    canonical_address: str
    host: str
    port: int = Field(ge=MIN_PORT, le=MAX_PORT)

    def __str__(self) -> str:
        return self.canonical_address


class ParseError(BaseModel):
    """Why *address* could not be parsed."""

    model_config = {"frozen": True}

    code: ParseErrorCode
    message: str
    address: str


def canonicalize(host: str, port: int) -> str:
    """Return ``host:port``, bracketing hosts that contain a colon."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def is_ipv6_literal(text: str) -> bool:
    """Check whether *text* has a shape some valid IPv6 literal can have.

    Only colon structure and group alphabet are checked. Embedded IPv4
    tails and zone IDs are not accepted in the bare form.
    """
    if text.count(":") > MAX_IPV6_COLONS or ":::" in text:
        return False
    compressed = text.count("::")
    if compressed > 1:
        return False

    groups = text.split(":")
    for group in groups:
        if len(group) > _IPV6_GROUP_DIGITS or not set(group) <= _HEX_DIGITS:
            return False

    if not compressed:
        return len(groups) == MAX_IPV6_COLONS + 1 and all(groups)
    if text.startswith(":") and not text.startswith("::"):
        return False
    return not (text.endswith(":") and not text.endswith("::"))


def _error(code: ParseErrorCode, message: str, address: str) -> ParseError:
    return ParseError(code=code, message=message, address=address)


def _parse_port(port_text: str, address: str) -> int | ParseError:
    if not port_text or not set(port_text) <= _DECIMAL_DIGITS:
        return _error(
            ParseErrorCode.BAD_PORT,
            f"bad port number '{port_text}' in '{address}'",
            address,
        )
    # Length is checked first: int() refuses very long digit strings.
    significant = port_text.lstrip("0")
    port = int(significant) if 0 < len(significant) <= len(str(MAX_PORT)) else 0
    if not MIN_PORT <= port <= MAX_PORT:
        return _error(
            ParseErrorCode.PORT_OUT_OF_RANGE,
            f"port {port_text} out of range in '{address}'",
            address,
        )
    return port


def _split_bracketed(address: str) -> tuple[str, str] | ParseError:
    """Split ``[host]:port`` into ``(host, port_text)``."""
    close = address.find("]")
    if close == -1:
        return _error(
            ParseErrorCode.UNTERMINATED_BRACKET,
            f"missing ']' in '{address}'",
            address,
        )
    host = address[1:close]
    rest = address[close + 1 :]
    if not host:
        return _error(ParseErrorCode.NO_HOST, f"no host in '{address}'", address)
    if "[" in host:
        return _error(ParseErrorCode.BAD_HOST, f"nested '[' in '{address}'", address)
    if not rest:
        return _error(
            ParseErrorCode.MISSING_PORT,
            f"expected ':port' after ']' in '{address}'",
            address,
        )
    if not rest.startswith(":"):
        return _error(
            ParseErrorCode.TRAILING_GARBAGE,
            f"unexpected '{rest}' after ']' in '{address}'",
            address,
        )
    return host, rest[1:]


def parse_host_and_port(address: str, default_port: int) -> Endpoint | ParseError:
    """Parse *address* into an :class:`Endpoint`.

    *default_port* is used when the address carries no port. It is held
    to the same 1..65535 range as an explicit port.
    """
    port_text: str | None = None

    if address.startswith("["):
        split = _split_bracketed(address)
        if isinstance(split, ParseError):
            return split
        host, port_text = split
    else:
        colons = address.count(":")
        if colons == 0:
            host = address
        elif colons == 1:
            host, port_text = address.split(":")
        elif is_ipv6_literal(address):
            host = address
        else:
            return _error(
                ParseErrorCode.BAD_IPV6,
                f"bad IPv6 address '{address}'",
                address,
            )

    if not host:
        return _error(ParseErrorCode.NO_HOST, f"no host in '{address}'", address)

    if port_text is None:
        if not MIN_PORT <= default_port <= MAX_PORT:
            return _error(
                ParseErrorCode.PORT_OUT_OF_RANGE,
                f"default port {default_port} out of range for '{address}'",
                address,
            )
        port = default_port
    else:
        parsed = _parse_port(port_text, address)
        if isinstance(parsed, ParseError):
            return parsed
        port = parsed

    endpoint = Endpoint(canonical_address=canonicalize(host, port), host=host, port=port)
    logger.debug("parsed %s as %s and %d (%s)", address, host, port, endpoint)
    return endpoint
