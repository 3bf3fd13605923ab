"""Schnorr signatures over event ids."""

import binascii
from dataclasses import dataclass

from .errors import InvalidSignature
from .secp import CURVE_ORDER, FIELD_PRIME


def _unhex(v):
    try:
        return binascii.unhexlify(v)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise InvalidSignature(f"invalid hex: {exc}") from exc


@dataclass(frozen=True)
class Signature:
    """A 64-byte BIP-340 Schnorr signature."""

    data: bytes

    def __post_init__(self):
        data = bytes(self.data)
        object.__setattr__(self, "data", data)
        if len(data) != 64:
            raise InvalidSignature("Signature is not 64 bytes long")
        if int.from_bytes(data[:32], "big") >= FIELD_PRIME:
            raise InvalidSignature("signature r value out of range")
        if int.from_bytes(data[32:], "big") >= CURVE_ORDER:
            raise InvalidSignature("signature s value out of range")

    @classmethod
    def from_bytes(cls, data):
        return cls(bytes(data))

    @classmethod
    def try_from_hex_string(cls, v):
        return cls(_unhex(v))

    def as_hex_string(self):
        return self.data.hex()

    def to_json(self):
        return self.as_hex_string()

    @classmethod
    def from_json(cls, value):
        if not isinstance(value, str):
            raise InvalidSignature("a hexadecimal string representing 64 bytes was expected")
        return cls.try_from_hex_string(value)


@dataclass(frozen=True)
class SignatureHex:
    """A signature kept as its hexadecimal string."""

    value: str

    @classmethod
    def from_signature(cls, sig):
        return cls(sig.as_hex_string())

    def to_signature(self):
        return Signature.try_from_hex_string(self.value)

    def __str__(self):
        return self.value