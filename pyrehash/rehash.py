#!/usr/bin/env python3
"""
Deterministic mapping of an arbitrary seed to a P-256 public key.

For counter = 0, 1, 2, ...:
    derived   = HKDF-SHA256(salt='', ikm=seed || be32(counter), info='', L=33)
    candidate = (0x02 | (derived[0] & 1)) || derived[1:33]
and the first candidate that decodes to a point on the curve and imports as a
public key is returned.
"""
import collections
import logging

from .decoders import default_decoder
from .utils import *

log = logging.getLogger(__name__)

DERIVED_LENGTH = 33
COUNTER_LIMIT = 2**32
KDF_SALT = b''
KDF_INFO = b''

Attempt = collections.namedtuple('Attempt', 'counter candidate key error')


def counter_bytes(counter):
    if not (0 <= counter < COUNTER_LIMIT):
        raise ValueError('The counter must be an integer in the range 0..2^32-1.')
    return counter.to_bytes(4, byteorder="big")

def derive(seed, counter):
    """Expand (seed, counter) into 33 pseudorandom bytes."""

    if not isinstance(seed, (bytes, bytearray, memoryview)):
        raise TypeError('The seed must be a byte string.')
    current_seed = bytes(seed) + counter_bytes(counter)
    return hkdf_sha256(current_seed, salt=KDF_SALT, info=KDF_INFO, length=DERIVED_LENGTH)

def build_candidate(derived):
    """Force the leading byte to a compressed point prefix (0x02 or 0x03)."""

    if len(derived) != DERIVED_LENGTH:
        raise ValueError('The derived material must be a 33-byte array.')
    return bytes([COMPRESSED_EVEN | (derived[0] & 0x01)]) + bytes(derived[1:])

def iter_attempts(seed, decoder=None, max_attempts=None):
    """Yield one Attempt per counter value, stopping after the first accepted key.

    Raises RehashExhaustedError if the counter space or max_attempts runs out.
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError('max_attempts must be positive.')
    decoder = decoder or default_decoder
    limit = COUNTER_LIMIT if max_attempts is None else min(max_attempts, COUNTER_LIMIT)
    for counter in range(limit):
        candidate = build_candidate(derive(seed, counter))
        result = decoder.decode(candidate)
        yield Attempt(counter, candidate, result.value, result.error)
        if result.error is None:
            log.debug('Accepted candidate after %d attempt(s)', counter + 1)
            return
        log.debug('Rejected candidate at counter %d: %s: %s',
                  counter, type(result.error).__name__, result.error)
    log.error('Gave up after %d attempts', limit)
    raise RehashExhaustedError(seed, limit)

def rehash_to_p256_with_trace(seed, decoder=None, max_attempts=None):
    """Return the public key for seed together with every attempt made."""

    attempts = list(iter_attempts(seed, decoder, max_attempts))
    return attempts[-1].key, attempts

def rehash_to_p256(seed, decoder=None, max_attempts=None):
    """Deterministically map seed to a P-256 public key."""

    for attempt in iter_attempts(seed, decoder, max_attempts):
        if attempt.error is None:
            return attempt.key
