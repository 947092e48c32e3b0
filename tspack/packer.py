"""TimeSeriesDataPacker: sort, window, run the strategy pipeline, merge.

Usage:
    packer = TimeSeriesDataPacker()
    attrs = PackAttributes(
        strategy_types=(PackStrategy.similar_values(),),
        microseconds_time_window=1_000_000,
        precision_epsilon=0.01,
    )
    packed = packer.pack(samples, attrs)
    attrs, approx_samples = packer.unpack()
"""

import dataclasses
import logging
import warnings
from operator import itemgetter
from typing import Iterable, List, Optional, Tuple

from .codec.delta import delta_unpack
from .codec.gorilla import xor_unpack
from .codec.merge import merge_adjacent_ranges
from .config import PackAttributes, StrategyKind
from .errors import InvalidWindowError
from .representation import Raw, apply_strategy, expand_ranges, finalize_to_packed
from .samples import PackedRange, Sample
from .windowing import split_into_windows

logger = logging.getLogger(__name__)

_INVERSES = {
    StrategyKind.DELTA: delta_unpack,
    StrategyKind.XOR: xor_unpack,
}


class TimeSeriesDataPacker:
    """Compress (timestamp, value) samples into value ranges.

    Keeps the attributes, sorted input and packed output of the last
    successful ``pack`` call so the result can be expanded again with
    ``unpack``. Not thread-safe; callers serialize access to one instance.
    """

    def __init__(self):
        self._attributes: Optional[PackAttributes] = None
        self._original_samples: List[Sample] = []
        self._packed_samples: List[PackedRange] = []

    @property
    def attributes(self) -> Optional[PackAttributes]:
        if self._attributes is None:
            return None
        return dataclasses.replace(self._attributes)

    @property
    def original_samples(self) -> List[Sample]:
        return list(self._original_samples)

    @property
    def packed_samples(self) -> List[PackedRange]:
        return list(self._packed_samples)

    def pack(
        self,
        samples: Iterable[Sample],
        attributes: PackAttributes,
    ) -> List[PackedRange]:
        """Pack samples with the configured strategy pipeline.

        Args:
            samples: (timestamp_seconds, value) pairs in any order.
            attributes: Strategies, window size and precision epsilon.

        Returns:
            Merged packed ranges sorted by start time.

        Raises:
            InvalidWindowError: ``microseconds_time_window`` is not positive.
                Stored state is left unchanged.
        """
        if attributes.microseconds_time_window <= 0:
            raise InvalidWindowError(attributes.microseconds_time_window)

        epsilon = attributes.precision_epsilon
        if epsilon < 0:
            warnings.warn(f"precision_epsilon {epsilon} is negative; using 0.0")
            epsilon = 0.0

        ordered = sorted(((float(ts), float(v)) for ts, v in samples), key=itemgetter(0))
        windows = split_into_windows(ordered, attributes.microseconds_time_window)

        packed_all: List[PackedRange] = []
        for window in windows:
            representation = Raw(tuple(window))
            for strategy in attributes.strategy_types:
                representation = apply_strategy(representation, strategy, epsilon)
            packed_all.extend(finalize_to_packed(representation))

        merged = merge_adjacent_ranges(packed_all, value_epsilon=attributes.merge_epsilon)

        logger.debug(
            "Packed %d samples in %d windows into %d ranges (%d before merge)",
            len(ordered), len(windows), len(merged), len(packed_all),
        )

        self._attributes = dataclasses.replace(attributes)
        self._original_samples = ordered
        self._packed_samples = merged
        return list(merged)

    def unpack(self) -> Tuple[Optional[PackAttributes], List[Sample]]:
        """Expand the stored ranges into samples, independent of strategy.

        Each range yields ``(start, value)``, plus ``(end, value)`` when the
        range spans time. Samples collapsed inside a run are not recovered,
        and values are the stored (possibly encoded) range values.

        Returns:
            (attributes, samples) of the last successful ``pack``, or
            ``(None, [])`` if nothing was packed yet.
        """
        return self.attributes, expand_ranges(self._packed_samples)

    def decode(self) -> List[Sample]:
        """Reconstruct samples using the last strategy's own inverse.

        When the pipeline ends with delta or XOR, the stored ranges are
        re-windowed exactly as during packing and each window is decoded
        with that strategy's inverse. Otherwise this is ``unpack()``.
        """
        attributes, samples = self.unpack()
        if attributes is None or not attributes.strategy_types:
            return samples

        inverse = _INVERSES.get(attributes.strategy_types[-1].kind)
        if inverse is None:
            return samples

        decoded: List[Sample] = []
        for window in split_into_windows(samples, attributes.microseconds_time_window):
            decoded.extend(inverse([((ts, ts), v) for ts, v in window]))
        return decoded
