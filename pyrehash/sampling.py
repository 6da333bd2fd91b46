#!/usr/bin/env python3
import collections
import logging

from .rehash import iter_attempts
from .utils import chacha20_seed_stream

log = logging.getLogger(__name__)

AttemptStats = collections.namedtuple('AttemptStats', 'count mean_counter max_counter histogram rejections')


def sample_attempts(count, key=bytes(32), decoder=None):
    """Run the rehash loop over count deterministic seeds.

    histogram maps the success counter to the number of seeds that stopped
    there, rejections maps error class names to how often they occurred.
    """
    if count <= 0:
        raise ValueError('count must be positive.')
    histogram = collections.Counter()
    rejections = collections.Counter()
    for seed in chacha20_seed_stream(key, count):
        for attempt in iter_attempts(seed, decoder):
            if attempt.error is not None:
                rejections[type(attempt.error).__name__] += 1
        histogram[attempt.counter] += 1
    total = sum(c * n for c, n in histogram.items())
    stats = AttemptStats(count, total / count, max(histogram), dict(histogram), dict(rejections))
    log.info('Sampled %d seeds: mean counter %.3f, max counter %d',
             count, stats.mean_counter, stats.max_counter)
    return stats
