"""BIP-340 Schnorr signatures over secp256k1."""

import hashlib
import os

FIELD_PRIME = 2**256 - 2**32 - 977
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_G = (
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
)


def _add(a, b):
    if a is None:
        return b
    if b is None:
        return a
    if a[0] == b[0] and a[1] != b[1]:
        return None
    if a == b:
        lam = 3 * a[0] * a[0] * pow(2 * a[1], -1, FIELD_PRIME) % FIELD_PRIME
    else:
        lam = (b[1] - a[1]) * pow(b[0] - a[0], -1, FIELD_PRIME) % FIELD_PRIME
    x3 = (lam * lam - a[0] - b[0]) % FIELD_PRIME
    return x3, (lam * (a[0] - x3) - a[1]) % FIELD_PRIME


def _mul(point, k):
    result = None
    while k:
        if k & 1:
            result = _add(result, point)
        point = _add(point, point)
        k >>= 1
    return result


def _tagged_hash(tag, msg):
    tag_hash = hashlib.sha256(tag.encode()).digest()
    return hashlib.sha256(tag_hash + tag_hash + msg).digest()


def _int(data):
    return int.from_bytes(data, "big")


def _bytes32(value):
    return value.to_bytes(32, "big")


def lift_x(x):
    """Return the curve point with x-coordinate ``x`` and even y."""
    if not 0 <= x < FIELD_PRIME:
        raise ValueError("x-coordinate out of range")
    c = (pow(x, 3, FIELD_PRIME) + 7) % FIELD_PRIME
    y = pow(c, (FIELD_PRIME + 1) // 4, FIELD_PRIME)
    if y * y % FIELD_PRIME != c:
        raise ValueError("x-coordinate is not on the curve")
    return x, y if y % 2 == 0 else FIELD_PRIME - y


def is_valid_xonly(data):
    """Whether ``data`` is a valid 32-byte x-only public key."""
    if len(data) != 32:
        return False
    try:
        lift_x(_int(data))
    except ValueError:
        return False
    return True


def _secret_scalar(secret_key):
    if len(secret_key) != 32:
        raise ValueError("secret key must be 32 bytes")
    d = _int(secret_key)
    if not 1 <= d < CURVE_ORDER:
        raise ValueError("secret key out of range")
    return d


def xonly_public_key(secret_key):
    """Derive the 32-byte x-only public key for a secret key."""
    return _bytes32(_mul(_G, _secret_scalar(secret_key))[0])


def schnorr_sign(message, secret_key, aux_rand=None):
    """Sign ``message`` and return a 64-byte BIP-340 signature."""
    if aux_rand is None:
        aux_rand = os.urandom(32)
    if len(aux_rand) != 32:
        raise ValueError("auxiliary randomness must be 32 bytes")
    message = bytes(message)
    d0 = _secret_scalar(secret_key)
    point = _mul(_G, d0)
    d = d0 if point[1] % 2 == 0 else CURVE_ORDER - d0
    masked = bytes(a ^ b for a, b in zip(_bytes32(d), _tagged_hash("BIP0340/aux", aux_rand)))
    px = _bytes32(point[0])
    k0 = _int(_tagged_hash("BIP0340/nonce", masked + px + message)) % CURVE_ORDER
    if k0 == 0:
        raise ValueError("derived nonce is zero")
    r_point = _mul(_G, k0)
    k = k0 if r_point[1] % 2 == 0 else CURVE_ORDER - k0
    rx = _bytes32(r_point[0])
    e = _int(_tagged_hash("BIP0340/challenge", rx + px + message)) % CURVE_ORDER
    return rx + _bytes32((k + e * d) % CURVE_ORDER)


def schnorr_verify(message, pubkey, signature):
    """Check a BIP-340 signature of ``message`` under an x-only public key."""
    if len(pubkey) != 32 or len(signature) != 64:
        return False
    try:
        point = lift_x(_int(pubkey))
    except ValueError:
        return False
    r = _int(signature[:32])
    s = _int(signature[32:])
    if r >= FIELD_PRIME or s >= CURVE_ORDER:
        return False
    e = _int(_tagged_hash("BIP0340/challenge", signature[:32] + bytes(pubkey) + bytes(message)))
    e %= CURVE_ORDER
    r_point = _add(_mul(_G, s), _mul(point, CURVE_ORDER - e))
    return r_point is not None and r_point[1] % 2 == 0 and r_point[0] == r