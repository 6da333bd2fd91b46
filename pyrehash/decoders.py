#!/usr/bin/env python3
"""
Point decoding and key import for candidate encodings.

Two capabilities exist for turning a 33-byte candidate into an importable
P-256 public key:

* CompressedPointDecoder reads the SEC1 compressed form, so the prefix byte
  selects the parity of y.
* CompactPointDecoder drops the prefix byte and reads the remaining 32 bytes
  as a compact representation, where y is always the smaller of the two roots.

Both report failures as values in a DecodeResult instead of raising, since
about half of all candidates are rejected.
"""
import collections

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from .utils import *

DecodeResult = collections.namedtuple('DecodeResult', 'value error')


def ok(value):
    return DecodeResult(value, None)

def fail(error):
    return DecodeResult(None, error)


def import_public_key(x963):
    """Import an uncompressed 0x04 || X || Y point as a P-256 public key."""

    if len(x963) != 65 or x963[0] != UNCOMPRESSED:
        return fail(ImportFailure('Expected a 65-byte uncompressed point, got {} bytes.'.format(len(x963))))
    try:
        key = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256R1(), bytes(x963))
    except ValueError as e:
        return fail(ImportFailure(str(e)))
    return ok(key)

def public_key_bytes(key, compressed=False):
    """Export a public key as X9.63 (65 bytes) or SEC1 compressed (33 bytes)."""

    point_format = serialization.PublicFormat.CompressedPoint if compressed \
        else serialization.PublicFormat.UncompressedPoint
    return key.public_bytes(encoding=serialization.Encoding.X962, format=point_format)


class PointDecoder:
    """Turns a 33-byte candidate into an imported public key."""

    form = None

    def to_x963(self, candidate):
        raise NotImplementedError

    def decode(self, candidate):
        converted = self.to_x963(candidate)
        if converted.error is not None:
            return converted
        return import_public_key(converted.value)

    def __repr__(self):
        return '{}()'.format(type(self).__name__)


class CompressedPointDecoder(PointDecoder):
    """SEC1 compressed points, decoded by the key library."""

    form = 'compressed'

    def to_x963(self, candidate):
        if len(candidate) != 33 or candidate[0] not in (COMPRESSED_EVEN, COMPRESSED_ODD):
            return fail(InvalidCurvePoint('Not a compressed point encoding.'))
        try:
            key = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256R1(), bytes(candidate))
        except ValueError as e:
            return fail(InvalidCurvePoint(str(e)))
        return ok(public_key_bytes(key))


class CompactPointDecoder(PointDecoder):
    """Compact representation: the prefix byte is ignored, y = min(y, p - y)."""

    form = 'compact'

    def to_x963(self, candidate):
        if len(candidate) != 33:
            return fail(InvalidCurvePoint('Expected a 33-byte candidate.'))
        P = point_from_compact_bytes(candidate[1:])
        if P is None:
            return fail(InvalidCurvePoint('x-coordinate is not on the curve.'))
        return ok(x963_from_point(P))


DECODERS = {
    CompressedPointDecoder.form: CompressedPointDecoder,
    CompactPointDecoder.form: CompactPointDecoder,
}

def select_decoder(form='compressed'):
    """Return the decoder for the given point form."""

    try:
        return DECODERS[form]()
    except KeyError:
        raise ValueError('Unknown point form: {}'.format(form)) from None

default_decoder = select_decoder()
