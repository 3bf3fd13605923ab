"""Relay information documents supplied by relays."""

import json
from dataclasses import dataclass, field

from .errors import NostrError
from .public_key import PublicKeyHexPrefix
from .url import Url

_U64_LIMIT = 2**64


def _compact(value):
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class RelayLimitation:
    """Limits a relay places on its clients."""

    max_message_length: int = 0
    max_subscriptions: int = 0
    max_filters: int = 0
    max_limit: int = 0
    max_subid_length: int = 0
    min_prefix: int = 0
    max_event_tags: int = 0
    max_content_length: int = 0
    min_pow_difficulty: int = 0
    auth_required: bool = False
    payment_required: bool = False


@dataclass
class RelayInformationDocument:
    """The information a relay publishes about itself."""

    name: str | None = None
    description: str | None = None
    pubkey: PublicKeyHexPrefix | None = None
    contact: str | None = None
    supported_nips: list = field(default_factory=list)
    software: str | None = None
    version: str | None = None
    limitation: RelayLimitation | None = None
    payments_url: Url | None = None
    other: dict = field(default_factory=dict)

    def supports_nip(self, nip):
        """Whether the relay lists ``nip`` as supported."""
        return nip in self.supported_nips

    def __str__(self):
        parts = ["Relay Information:"]
        for label, value in (
            ("Name", self.name),
            ("Description", self.description),
            ("Pubkey", self.pubkey),
            ("Contact", self.contact),
        ):
            if value is not None:
                parts.append(f'{label}="{value}"')
        parts.append(f"NIPS={list(self.supported_nips)}")
        for label, value in (("Software", self.software), ("Version", self.version)):
            if value is not None:
                parts.append(f'{label}="{value}"')
        for key in sorted(self.other):
            parts.append(f'{key}="{_compact(self.other[key])}"')
        return " ".join(parts)

    def to_json(self):
        """A JSON-compatible dict: the known fields first, then the others sorted."""
        out = {
            "name": self.name,
            "description": self.description,
            "pubkey": self.pubkey.value if self.pubkey is not None else None,
            "contact": self.contact,
            "supported_nips": list(self.supported_nips),
            "software": self.software,
            "version": self.version,
        }
        for key in sorted(self.other):
            out[key] = self.other[key]
        return out

    @classmethod
    def from_json(cls, value):
        """Build from a decoded JSON object; unknown fields go to ``other``."""
        if not isinstance(value, dict):
            raise NostrError("A JSON object was expected")
        rest = dict(value)

        def text(key):
            item = rest.pop(key, None)
            return item if isinstance(item, str) else None

        doc = cls()
        doc.name = text("name")
        doc.description = text("description")
        pubkey = text("pubkey")
        if pubkey is not None:
            doc.pubkey = PublicKeyHexPrefix.try_from_str(pubkey)
        doc.contact = text("contact")
        nips = rest.pop("supported_nips", None)
        if isinstance(nips, list):
            doc.supported_nips = [
                n & 0xFFFFFFFF
                for n in nips
                if isinstance(n, int) and not isinstance(n, bool) and 0 <= n < _U64_LIMIT
            ]
        doc.software = text("software")
        doc.version = text("version")
        doc.other = rest
        return doc

    def dumps(self):
        """Compact JSON text."""
        return _compact(self.to_json())

    @classmethod
    def loads(cls, text):
        """Parse JSON text."""
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise NostrError(f"invalid JSON: {exc}") from exc
        return cls.from_json(value)