"""XOR (Gorilla) strategy for float64 time-series values.

Follows the value half of Facebook's Gorilla encoding (Pelkonen et al., 2015):
  - First value stored verbatim
  - Each subsequent value stored as the XOR of its IEEE 754 bit pattern
    with the previous value's bit pattern, reinterpreted as a float64

XOR is its own inverse, so decoding is bit-exact for every input,
including NaN payloads, infinities and negative zero:
    bits[i] == bits[i-1] XOR stored[i]

Slowly changing series produce XOR words with long runs of zero bits,
which downstream entropy coders compress well.
"""

from typing import List, Sequence

import numpy as np

from ..samples import PackedRange, Sample


def _to_bits(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=np.float64).view(np.uint64)


def _from_bits(bits: np.ndarray) -> List[float]:
    return bits.view(np.float64).tolist()


def xor_pack(samples: Sequence[Sample]) -> List[PackedRange]:
    """Encode each value as the XOR of its bit pattern with its predecessor's.

    Every sample becomes a single-point range at its own timestamp.
    """
    if not samples:
        return []

    timestamps = [ts for ts, _ in samples]
    bits = _to_bits([v for _, v in samples])

    encoded = bits.copy()
    encoded[1:] = bits[1:] ^ bits[:-1]

    return [((ts, ts), v) for ts, v in zip(timestamps, _from_bits(encoded))]


def xor_unpack(packed: Sequence[PackedRange]) -> List[Sample]:
    """Decode XOR-encoded ranges back to the original values, bit for bit."""
    if not packed:
        return []

    timestamps = [start for (start, _), _ in packed]
    stored = _to_bits([v for _, v in packed])
    bits = np.bitwise_xor.accumulate(stored)

    return list(zip(timestamps, _from_bits(bits)))
