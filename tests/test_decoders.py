#!/usr/bin/env python3
import pytest

from pyrehash import (CompactPointDecoder, CompressedPointDecoder, ImportFailure, InvalidCurvePoint,
                      import_public_key, public_key_bytes, rehash_to_p256_with_trace, select_decoder)
from pyrehash.utils import (curve, is_on_curve, point_from_bytes_xy, point_from_compressed_bytes,
                            x963_from_point, x, y)

# accepted at counter 0 for the all-zero seed
VALID = bytes.fromhex('029679f781c431d760ccfc87828a3b95ba3e13496dec97e3538087d5c9ca7b8e99')
VALID_X963 = bytes.fromhex('049679f781c431d760ccfc87828a3b95ba3e13496dec97e3538087d5c9ca7b8e99'
                           '2840e45a83f98e909dd303df444d7dcceb3d0e0a2395ce9d99fd292d85e35ab2')
# rejected at counter 0 for the empty seed
INVALID = bytes.fromhex('0295c2fcadedc208039e23e484f61fc58c91e23fda4173f66216bb67481d2b6aa4')


def test_generator_is_on_curve():
    assert is_on_curve(curve.G)
    assert not is_on_curve((x(curve.G), y(curve.G) + 1))
    assert not is_on_curve(None)


def test_compressed_decoder():
    decoder = CompressedPointDecoder()
    result = decoder.to_x963(VALID)
    assert result.error is None
    assert result.value == VALID_X963

    result = decoder.decode(VALID)
    assert result.error is None
    assert public_key_bytes(result.value) == VALID_X963
    assert public_key_bytes(result.value, compressed=True) == VALID


def test_compressed_decoder_odd_prefix_negates_y():
    odd = bytes([0x03]) + VALID[1:]
    result = CompressedPointDecoder().decode(odd)
    assert result.error is None
    P = point_from_bytes_xy(public_key_bytes(result.value)[1:])
    assert y(P) == curve.p - int.from_bytes(VALID_X963[33:], 'big')


def test_compressed_decoder_rejects():
    decoder = CompressedPointDecoder()
    for candidate in (INVALID, bytes([0x04]) + VALID[1:], VALID[:32], b'\x02' + b'\xff' * 32):
        result = decoder.decode(candidate)
        assert result.value is None
        assert isinstance(result.error, InvalidCurvePoint)


def test_pure_decompression_agrees():
    P = point_from_compressed_bytes(VALID)
    assert x963_from_point(P) == VALID_X963
    assert point_from_compressed_bytes(INVALID) is None
    assert point_from_compressed_bytes(b'\x05' + VALID[1:]) is None


def test_compact_decoder_chooses_smaller_root():
    decoder = CompactPointDecoder()
    for prefix in (0x02, 0x03):
        result = decoder.decode(bytes([prefix]) + VALID[1:])
        assert result.error is None
        P = point_from_bytes_xy(public_key_bytes(result.value)[1:])
        assert x(P) == int.from_bytes(VALID[1:], 'big')
        assert y(P) <= curve.p - y(P)
    assert isinstance(decoder.decode(INVALID).error, InvalidCurvePoint)
    assert isinstance(decoder.decode(VALID[1:]).error, InvalidCurvePoint)


def test_compact_decoder_rehash():
    compact = select_decoder('compact')
    compressed = select_decoder('compressed')
    for seed in (b'', b'\x03', bytes(32), b'rainbow-sloth-test'):
        key_a, attempts_a = rehash_to_p256_with_trace(seed, decoder=compact)
        key_b, attempts_b = rehash_to_p256_with_trace(seed, decoder=compressed)
        # validity only depends on x, so both stop at the same counter
        assert len(attempts_a) == len(attempts_b)
        A = point_from_bytes_xy(public_key_bytes(key_a)[1:])
        B = point_from_bytes_xy(public_key_bytes(key_b)[1:])
        assert x(A) == x(B)
        assert y(A) == min(y(B), curve.p - y(B))


def test_import_public_key():
    result = import_public_key(VALID_X963)
    assert result.error is None
    assert public_key_bytes(result.value) == VALID_X963
    for bad in (VALID_X963[:64], VALID, b'\x05' + VALID_X963[1:], VALID_X963[:64] + b'\x00'):
        result = import_public_key(bad)
        assert result.value is None
        assert isinstance(result.error, ImportFailure)


def test_select_decoder():
    assert isinstance(select_decoder(), CompressedPointDecoder)
    assert isinstance(select_decoder('compact'), CompactPointDecoder)
    with pytest.raises(ValueError):
        select_decoder('hybrid')
