"""Bech32 nostr identifiers and ``nostr:`` URLs found in text."""

import re
from dataclasses import dataclass

from .errors import NostrError
from .profile import Profile
from .public_key import PublicKey

# Bech32 alphabet: qpzry9x8gf2tvdw0s3jn54khce6mua7l
_BECH32_RE = re.compile(
    r"(?:^|[^a-zA-Z0-9])((?:note|nevent|nprofile|npub)1[ac-hj-np-z02-9]{58,})(?:\Z|[^a-zA-Z0-9])"
)
_NOSTRURL_RE = re.compile(
    r"(?:^|[^a-zA-Z0-9])(nostr:(?:note|nevent|nprofile|npub)1[ac-hj-np-z02-9]{58,})(?:\Z|[^a-zA-Z0-9])"
)

_DECODERS = (
    ("npub1", PublicKey.try_from_bech32_string),
    ("nprofile1", Profile.try_from_bech32_string),
)


def find_nostr_bech32_pos(s):
    """Start and end of the next bech32 nostr sequence in ``s``, or None."""
    match = _BECH32_RE.search(s)
    return match.span(1) if match else None


def find_nostr_url_pos(s):
    """Start and end of the next ``nostr:`` URL in ``s``, or None."""
    match = _NOSTRURL_RE.search(s)
    return match.span(1) if match else None


def _find_all(s, finder, parser):
    found = []
    cursor = 0
    while (pos := finder(s[cursor:])) is not None:
        start, end = pos
        item = parser(s[cursor + start:cursor + end])
        if item is not None:
            found.append(item)
        cursor += end
    return found


@dataclass(frozen=True)
class NostrBech32:
    """A bech32 nostr object: a ``PublicKey`` (npub) or a ``Profile`` (nprofile)."""

    value: object

    def __str__(self):
        return self.value.as_bech32_string()

    @classmethod
    def try_from_string(cls, s):
        """Parse ``s`` exactly, with no surrounding text; None if it is not one."""
        for prefix, decoder in _DECODERS:
            if s.startswith(prefix):
                try:
                    return cls(decoder(s))
                except NostrError:
                    return None
        return None

    @classmethod
    def find_all_in_string(cls, s):
        """Every recognised bech32 object in ``s``, in order of appearance."""
        return _find_all(s, find_nostr_bech32_pos, cls.try_from_string)


@dataclass(frozen=True)
class NostrUrl:
    """A ``nostr:`` URL wrapping a ``NostrBech32``."""

    bech32: NostrBech32

    def __str__(self):
        return f"nostr:{self.bech32}"

    @classmethod
    def try_from_string(cls, s):
        """Parse ``s`` exactly, with no surrounding text; None if it is not one."""
        if not s.startswith("nostr:"):
            return None
        inner = NostrBech32.try_from_string(s[6:])
        return cls(inner) if inner is not None else None

    @classmethod
    def find_all_in_string(cls, s):
        """Every ``nostr:`` URL in ``s``, in order; bare bech32 is not counted."""
        return _find_all(s, find_nostr_url_pos, cls.try_from_string)


def urlize(s):
    """Add the ``nostr:`` prefix to every bech32 sequence in ``s`` that lacks it."""
    parts = []
    cursor = 0
    while (pos := find_nostr_bech32_pos(s[cursor:])) is not None:
        start, end = pos
        if start >= 6 and s[cursor + start - 6:cursor + start] == "nostr:":
            parts.append(s[cursor:cursor + end])
        else:
            parts.append(s[cursor:cursor + start])
            parts.append("nostr:")
            parts.append(s[cursor + start:cursor + end])
        cursor += end
    parts.append(s[cursor:])
    return "".join(parts)