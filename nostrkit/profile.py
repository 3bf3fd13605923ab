"""Profiles: a public key together with relays where it can be found."""

import json
from dataclasses import dataclass, field

from . import bech32
from .errors import InvalidProfile, WrongBech32
from .public_key import PublicKey
from .url import UncheckedUrl

_TLV_SPECIAL = 0
_TLV_RELAY = 1


@dataclass(frozen=True)
class Profile:
    """The data needed to follow someone: their key and some of their relays."""

    pubkey: PublicKey
    relays: list = field(default_factory=list)

    def as_bech32_string(self):
        """Encode as an ``nprofile`` bech32 string."""
        tlv = bytearray([_TLV_SPECIAL, 32])
        tlv += self.pubkey.as_bytes()
        for relay in self.relays:
            raw = relay.value.encode("utf-8")
            if len(raw) > 255:
                raise InvalidProfile("relay URL too long to encode")
            tlv += bytes([_TLV_RELAY, len(raw)])
            tlv += raw
        return bech32.encode("nprofile", bytes(tlv))

    @classmethod
    def try_from_bech32_string(cls, s):
        """Decode an ``nprofile`` bech32 string."""
        hrp, tlv = bech32.decode(s)
        if hrp != "nprofile":
            raise WrongBech32("nprofile", hrp)
        if len(tlv) < 2 + 32 or tlv[0] != _TLV_SPECIAL or tlv[1] != 32:
            raise InvalidProfile("profile must start with a 32-byte public key")
        pubkey = PublicKey.from_bytes(tlv[2:34])
        relays = []
        pos = 34
        while len(tlv) >= pos + 2:
            typ, length = tlv[pos], tlv[pos + 1]
            pos += 2
            if typ != _TLV_RELAY:
                raise InvalidProfile(f"unexpected TLV type {typ}")
            if len(tlv) < pos + length:
                raise InvalidProfile("relay entry is truncated")
            try:
                relay = tlv[pos:pos + length].decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidProfile("relay entry is not valid UTF-8") from exc
            relays.append(UncheckedUrl(relay))
            pos += length
        return cls(pubkey, relays)

    def to_json(self):
        return {
            "pubkey": self.pubkey.to_json(),
            "relays": [relay.value for relay in self.relays],
        }

    @classmethod
    def from_json(cls, value):
        if isinstance(value, str):
            value = json.loads(value)
        if not isinstance(value, dict):
            raise InvalidProfile("a JSON object was expected")
        if "pubkey" not in value or "relays" not in value:
            raise InvalidProfile("profile requires pubkey and relays")
        relays = value["relays"]
        if not isinstance(relays, list) or not all(isinstance(r, str) for r in relays):
            raise InvalidProfile("relays must be a list of strings")
        return cls(PublicKey.from_json(value["pubkey"]), [UncheckedUrl(r) for r in relays])