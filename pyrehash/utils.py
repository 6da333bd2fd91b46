#!/usr/bin/env python3

import collections
from chacha20poly1305 import ChaCha
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

EllipticCurve = collections.namedtuple('EllipticCurve', 'name p a b G n h')

curve = EllipticCurve(
    'secp256r1',
    # Field characteristic.
    p=0xffffffff00000001000000000000000000000000ffffffffffffffffffffffff,
    # Curve coefficients, y^2 = x^3 + a*x + b.
    a=0xffffffff00000001000000000000000000000000fffffffffffffffffffffffc,
    b=0x5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b,
    # Base point.
    G=(0x6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296,
       0x4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5),
    # Subgroup order.
    n=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551,
    # Subgroup cofactor.
    h=1,
)

COMPRESSED_EVEN = 0x02
COMPRESSED_ODD = 0x03
UNCOMPRESSED = 0x04


class InvalidCurvePoint(ValueError):
    """The candidate x-coordinate has no matching point on the curve."""
    pass

class ImportFailure(ValueError):
    """The key library refused to import the decoded point."""
    pass

class RehashExhaustedError(RuntimeError):
    def __init__(self, seed, attempts, message='No valid curve point found.'):
        super().__init__(message)
        self.seed = seed
        self.attempts = attempts

    def __str__(self):
        return '{} Attempts: {}'.format(self.args[0], self.attempts)


def x(P):
    return P[0]

def y(P):
    return P[1]

def int_from_bytes(b):
    return int.from_bytes(b, byteorder="big")

def bytes_from_int(x, length=32):
    return x.to_bytes(length, byteorder="big")

def bytes_from_point_xy(P):
    return bytes_from_int(x(P)) + bytes_from_int(y(P))

def x963_from_point(P):
    """Encode a point as 0x04 || X || Y."""
    return bytes([UNCOMPRESSED]) + bytes_from_point_xy(P)

def is_on_curve(P) -> bool:
    if P is None:
        return False
    if not (0 <= x(P) < curve.p and 0 <= y(P) < curve.p):
        return False
    return (pow(y(P), 2, curve.p) - (pow(x(P), 3, curve.p) + curve.a * x(P) + curve.b)) % curve.p == 0

def y_from_x(x):
    """Return one square root of x^3 + a*x + b, or None if x is not on the curve.

    p = 3 (mod 4) for P-256, so the root is y_sq^((p+1)/4).
    """
    if x >= curve.p:
        return None
    y_sq = (pow(x, 3, curve.p) + curve.a * x + curve.b) % curve.p
    y = pow(y_sq, (curve.p + 1) // 4, curve.p)
    if pow(y, 2, curve.p) != y_sq:
        return None
    return y

def point_from_compressed_bytes(b):
    if len(b) != 33 or b[0] not in (COMPRESSED_EVEN, COMPRESSED_ODD):
        return None
    x = int_from_bytes(b[1:])
    y = y_from_x(x)
    if y is None:
        return None
    if (y & 1) != (b[0] & 1):
        y = curve.p - y
    return (x, y)

def point_from_compact_bytes(b):
    """Decode a 32-byte x-coordinate, choosing y = min(y, p - y)."""
    if len(b) != 32:
        return None
    x = int_from_bytes(b)
    y = y_from_x(x)
    if y is None:
        return None
    return (x, min(y, curve.p - y))

def point_from_bytes_xy(b):
    if len(b) != 64:
        return None
    P = (int_from_bytes(b[:32]), int_from_bytes(b[32:]))
    if not is_on_curve(P):
        return None
    return P

def hkdf_sha256(ikm, salt=b'', info=b'', length=32):
    """HKDF extract-and-expand with SHA-256 (RFC 5869).

    An empty salt is passed on as a zero-length key, which HMAC pads to the
    same block as the RFC's default of HashLen zero bytes.
    """
    hkdf = HKDF(algorithm=hashes.SHA256(), length=length, salt=bytes(salt), info=bytes(info))
    return hkdf.derive(bytes(ikm))

def chacha20_seed_stream(key, count):
    """Deterministic list of 32-byte seeds taken from the ChaCha20 key stream."""

    if len(key) != 32:
        raise ValueError('The key must be a 32-byte array.')
    nonce = bytes(12)
    chacha20 = ChaCha(key, nonce)
    seeds = []
    block = 0
    while len(seeds) < count:
        key_stream = chacha20.key_stream(block)
        seeds.append(bytes(key_stream[:32]))
        seeds.append(bytes(key_stream[32:]))
        block += 1
    return seeds[:count]
