"""Unchecked, validated and relay URLs."""

import ipaddress
import re
from dataclasses import dataclass

from .errors import InvalidUrl, InvalidUrlHost, InvalidUrlMissingAuthority, InvalidUrlScheme

_SPECIAL_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/:<>?@[\\]^|")
_AUTHORITY_END_RE = re.compile(r"[/?#]")


@dataclass(frozen=True, order=True)
class UncheckedUrl:
    """A string meant to be a URL that has not been validated."""

    value: str

    def __str__(self):
        return self.value


def _split_port(hostport):
    if hostport.startswith("["):
        close = hostport.find("]")
        if close < 0:
            raise InvalidUrl(f"unterminated IPv6 address: {hostport!r}")
        host, after = hostport[: close + 1], hostport[close + 1:]
        if after and not after.startswith(":"):
            raise InvalidUrl(f"invalid characters after IPv6 address: {hostport!r}")
        port = after[1:]
    else:
        host, _, port = hostport.partition(":")
    if not port:
        return host, None
    if not port.isascii() or not port.isdigit() or int(port) > 65535:
        raise InvalidUrl(f"invalid port: {port!r}")
    return host, int(port)


def _domain_to_ascii(host):
    host = host.lower()
    if host.isascii():
        return host
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError as exc:
        raise InvalidUrl(f"invalid international domain: {host!r}") from exc


def _normalize_host(host, special):
    if not host:
        raise InvalidUrlHost("")
    if host.startswith("["):
        try:
            addr = ipaddress.IPv6Address(host[1:-1])
        except ValueError as exc:
            raise InvalidUrl(f"invalid IPv6 address: {host!r}") from exc
        display = f"[{addr.compressed}]"
        if not addr.is_global:
            raise InvalidUrlHost(display)
        return display
    if any(c in _FORBIDDEN_HOST_CHARS for c in host):
        raise InvalidUrl(f"forbidden character in host: {host!r}")
    if special:
        host = _domain_to_ascii(host)
        try:
            addr = ipaddress.IPv4Address(host)
        except ValueError:
            pass
        else:
            if not addr.is_global:
                raise InvalidUrlHost(str(addr))
            return str(addr)
    if host != host.strip() or host.startswith("localhost"):
        raise InvalidUrlHost(host)
    return host


def _normalize(text):
    scheme, sep, rest = text.partition(":")
    if not sep or not _SCHEME_RE.fullmatch(scheme):
        raise InvalidUrl(f"relative URL without a base: {text!r}")
    scheme = scheme.lower()
    special = scheme in _SPECIAL_PORTS
    if special:
        rest = rest.lstrip("/")
    elif rest.startswith("//"):
        rest = rest[2:]
    else:
        raise InvalidUrlMissingAuthority()
    match = _AUTHORITY_END_RE.search(rest)
    end = match.start() if match else len(rest)
    authority, tail = rest[:end], rest[end:]
    userinfo, at, hostport = authority.rpartition("@")
    host, port = _split_port(hostport)
    host = _normalize_host(host, special)
    if special:
        if port == _SPECIAL_PORTS[scheme]:
            port = None
        if not tail.startswith("/"):
            tail = "/" + tail
    netloc = (userinfo + "@" if at else "") + host + (f":{port}" if port is not None else "")
    return f"{scheme}://{netloc}{tail}"


@dataclass(frozen=True, order=True)
class Url:
    """A normalized URL with an authority naming an Internet host."""

    value: str

    @classmethod
    def try_from_str(cls, s):
        """Validate and normalize a URL string."""
        return cls(_normalize(s.strip()))

    @classmethod
    def try_from_unchecked_url(cls, u):
        """Validate and normalize an ``UncheckedUrl``."""
        return cls.try_from_str(u.value)

    def to_unchecked_url(self):
        return UncheckedUrl(self.value)

    def __str__(self):
        return self.value


@dataclass(frozen=True, order=True)
class RelayUrl:
    """A URL validated as a websocket relay address in canonical form."""

    value: str

    @classmethod
    def try_from_url(cls, u):
        """Accept a ``Url`` whose scheme is ws or wss."""
        scheme = u.value.partition(":")[0].lower()
        if scheme not in ("ws", "wss"):
            raise InvalidUrlScheme(scheme)
        return cls(_normalize(u.value))

    @classmethod
    def try_from_unchecked_url(cls, u):
        return cls.try_from_str(u.value)

    @classmethod
    def try_from_str(cls, s):
        return cls.try_from_url(Url.try_from_str(s))

    def to_url(self):
        return Url(self.value)

    def to_unchecked_url(self):
        return UncheckedUrl(self.value)

    def __str__(self):
        return self.value