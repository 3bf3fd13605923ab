"""Responses from a zapper's lnurl pay endpoint."""

import json
from dataclasses import dataclass, field

from .errors import NostrError
from .public_key import PublicKeyHex
from .url import UncheckedUrl


@dataclass
class PayRequestData:
    """A zapper lnurl pay-request response."""

    callback: UncheckedUrl
    nostr_pubkey: PublicKeyHex
    metadata: list = field(default_factory=list)
    allows_nostr: bool | None = None
    other: dict = field(default_factory=dict)

    def to_json(self):
        """A JSON-compatible dict: the known fields first, then the others sorted."""
        out = {
            "callback": self.callback.value,
            "metadata": [[key, val] for key, val in self.metadata],
            "allowsNostr": self.allows_nostr,
            "nostrPubkey": self.nostr_pubkey.value,
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

        callback = rest.pop("callback", None)
        if not isinstance(callback, str):
            raise NostrError("Missing callback url")

        metadata = []
        raw_metadata = rest.pop("metadata", None)
        if isinstance(raw_metadata, list):
            for entry in raw_metadata:
                if not isinstance(entry, list):
                    raise NostrError("Metadata entry not recognized")
                if len(entry) != 2:
                    raise NostrError("Metadata entry not a pair")
                key, val = entry
                if isinstance(key, str) and isinstance(val, str):
                    metadata.append((key, val))

        allows_nostr = rest.pop("allowsNostr", None)
        if not isinstance(allows_nostr, bool):
            allows_nostr = None

        pubkey = rest.pop("nostrPubkey", None)
        if not isinstance(pubkey, str):
            raise NostrError("Missing nostrPubkey")

        return cls(
            callback=UncheckedUrl(callback),
            nostr_pubkey=PublicKeyHex.try_from_str(pubkey),
            metadata=metadata,
            allows_nostr=allows_nostr,
            other=rest,
        )

    def dumps(self):
        """Compact JSON text."""
        return json.dumps(self.to_json(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def loads(cls, text):
        """Parse JSON text."""
        try:
            value = json.loads(text)
        except json.JSONDecodeError as exc:
            raise NostrError(f"invalid JSON: {exc}") from exc
        return cls.from_json(value)