"""Bech32 encoding and decoding of byte strings."""

from .errors import NostrError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


class Bech32Error(NostrError):
    """A bech32 string or its payload was malformed."""


def _polymod(values):
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp):
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _check_hrp(hrp):
    if not hrp:
        raise Bech32Error("empty human-readable part")
    if any(not 33 <= ord(c) <= 126 for c in hrp):
        raise Bech32Error("invalid character in human-readable part")
    if hrp.lower() != hrp and hrp.upper() != hrp:
        raise Bech32Error("mixed case in human-readable part")


def convertbits(data, frombits, tobits, pad=True):
    """Regroup a sequence of ``frombits``-wide integers into ``tobits``-wide ones."""
    acc = 0
    bits = 0
    out = []
    maxv = (1 << tobits) - 1
    max_acc = (1 << (frombits + tobits - 1)) - 1
    for value in data:
        if value < 0 or value >> frombits:
            raise Bech32Error(f"value {value} does not fit in {frombits} bits")
        acc = ((acc << frombits) | value) & max_acc
        bits += frombits
        while bits >= tobits:
            bits -= tobits
            out.append((acc >> bits) & maxv)
    if pad:
        if bits:
            out.append((acc << (tobits - bits)) & maxv)
    elif bits >= frombits or (acc << (tobits - bits)) & maxv:
        raise Bech32Error("invalid padding")
    return out


def encode(hrp, data):
    """Encode bytes under the given prefix as a bech32 string."""
    _check_hrp(hrp)
    hrp = hrp.lower()
    five = convertbits(bytes(data), 8, 5, True)
    polymod = _polymod(_hrp_expand(hrp) + five + [0] * 6) ^ _BECH32_CONST
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(CHARSET[d] for d in five + checksum)


def decode(s):
    """Decode a bech32 string into its prefix and payload bytes."""
    if s.lower() != s and s.upper() != s:
        raise Bech32Error("mixed case")
    s = s.lower()
    pos = s.rfind("1")
    if pos < 1:
        raise Bech32Error("missing separator or empty human-readable part")
    if pos + 7 > len(s):
        raise Bech32Error("data part too short")
    hrp = s[:pos]
    _check_hrp(hrp)
    data = []
    for c in s[pos + 1:]:
        index = CHARSET.find(c)
        if index < 0:
            raise Bech32Error(f"invalid character {c!r}")
        data.append(index)
    if _polymod(_hrp_expand(hrp) + data) not in (_BECH32_CONST, _BECH32M_CONST):
        raise Bech32Error("invalid checksum")
    return hrp, bytes(convertbits(data[:-6], 5, 8, False))