"""
Deterministic rehash-to-curve for NIST P-256

Maps an arbitrary byte seed to a valid P-256 public key by rejection
sampling: HKDF-SHA256 expands seed || counter into a compressed point
candidate, and the counter is incremented until the candidate decodes.
"""
from .rehash import (Attempt, build_candidate, counter_bytes, derive, iter_attempts,
                     rehash_to_p256, rehash_to_p256_with_trace)

from .decoders import (CompactPointDecoder, CompressedPointDecoder, DecodeResult, PointDecoder,
                       import_public_key, public_key_bytes, select_decoder)

from .sampling import AttemptStats, sample_attempts

from .utils import ImportFailure, InvalidCurvePoint, RehashExhaustedError

from .version import __version__
