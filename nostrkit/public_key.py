"""Public keys that identify actors, in binary, hex and prefix form."""

import binascii
import string
from dataclasses import dataclass

from . import bech32
from .errors import InvalidPublicKey, InvalidPublicKeyPrefix, InvalidSignature, WrongBech32
from .secp import is_valid_xonly, schnorr_verify

_HEX_DIGITS = frozenset(string.hexdigits)


def _unhex(v):
    try:
        return binascii.unhexlify(v)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise InvalidPublicKey(f"invalid hex: {exc}") from exc


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte x-only secp256k1 public key."""

    data: bytes

    def __post_init__(self):
        data = bytes(self.data)
        object.__setattr__(self, "data", data)
        if len(data) != 32:
            raise InvalidPublicKey("Public key is not 32 bytes long")
        if not is_valid_xonly(data):
            raise InvalidPublicKey("Public key is not a valid curve point")

    @classmethod
    def from_bytes(cls, data):
        return cls(bytes(data))

    @classmethod
    def try_from_hex_string(cls, v):
        return cls(_unhex(v))

    @classmethod
    def try_from_bech32_string(cls, s):
        """Decode an ``npub`` string."""
        hrp, data = bech32.decode(s)
        if hrp != "npub":
            raise WrongBech32("npub", hrp)
        return cls(data)

    def as_hex_string(self):
        return self.data.hex()

    def as_bech32_string(self):
        return bech32.encode("npub", self.data)

    def as_bytes(self):
        return self.data

    def verify(self, message, signature):
        """Raise ``InvalidSignature`` unless ``signature`` signs ``message``."""
        if not schnorr_verify(bytes(message), self.data, signature.data):
            raise InvalidSignature("signature verification failed")

    def to_json(self):
        return self.as_hex_string()

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, str):
            raise InvalidPublicKey("a hexadecimal string representing 32 bytes was expected")
        return cls.try_from_hex_string(value)


@dataclass(frozen=True)
class PublicKeyHex:
    """A public key kept as its 64-character hexadecimal string."""

    value: str

    def __post_init__(self):
        if len(self.value) != 64:
            raise InvalidPublicKey("Public key hex must be 64 characters")
        _unhex(self.value)

    @classmethod
    def try_from_str(cls, s):
        return cls(s)

    @classmethod
    def from_public_key(cls, pk):
        return cls(pk.as_hex_string())

    def to_public_key(self):
        return PublicKey.try_from_hex_string(self.value)

    def as_bech32_string(self):
        return bech32.encode("npub", bytes.fromhex(self.value))

    def prefix(self, chars):
        """The first ``chars`` hex characters (at most 64) as a prefix."""
        return PublicKeyHexPrefix(self.value[: min(chars, 64)])

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class PublicKeyHexPrefix:
    """A leading part of a hexadecimal public key."""

    value: str

    def __post_init__(self):
        if len(self.value) > 64:
            raise InvalidPublicKeyPrefix("Public key prefix longer than 64 characters")
        if any(c not in _HEX_DIGITS for c in self.value):
            raise InvalidPublicKeyPrefix("Public key prefix is not hexadecimal")

    @classmethod
    def try_from_str(cls, s):
        return cls(s)

    @classmethod
    def from_public_key_hex(cls, pubkey):
        return cls(pubkey.value)

    def matches(self, pubkey):
        """Whether ``pubkey`` starts with this prefix."""
        return pubkey.value.startswith(self.value)

    def __str__(self):
        return self.value