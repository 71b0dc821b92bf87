"""
Four-sample rolling time buffer with centered derivatives.

A ``TimeSeries4`` keeps the four most recent samples of one physical quantity
(position, momentum, field, ...) for a single particle. Every buffer is bound
for its whole lifetime to a companion ``TimeSeries4[float]`` holding the
simulation time of each slot; several quantity buffers of one particle share
the same time base and are advanced in lockstep with it.

Slots, oldest first:

    old2    t - 3
    old     t - 2
    now     t - 1
    future  t - 0

Derivatives are only available at ``old`` and ``now``, where both neighbours
exist. The estimate at a slot divides the difference of its two neighbours by
the difference of their times.
"""

from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar
import numpy as np

from ..vector import as_sample
from .types import (
    Slot,
    TimeBaseMismatchError,
    MissingTimeBaseError,
    DegenerateTimeBaseError,
)

T = TypeVar("T")
U = TypeVar("U")

_SAME_TIME_BASE = object()


class TimeSeries4(Generic[T]):
    """
    Rolling window of four samples bound to a shared time base.

    The sample type only needs subtraction and division by a float, so both
    Python floats and numpy vectors work. Array-like samples are copied on
    entry; a buffer never aliases the caller's arrays.

    The time base is borrowed: it is owned and advanced by the caller and must
    outlive every buffer that references it. A time buffer itself is usually
    created with ``time_base=None``.

    Example:
        >>> times = TimeSeries4(0.0, 1.0, 2.0, 3.0)
        >>> x = TimeSeries4(0.0, 2.0, 4.0, 6.0, time_base=times)
        >>> x.dot_now()
        2.0
        >>> times.advance(4.0); x.advance(8.0)
        >>> x.now
        6.0
    """

    def __init__(self, old2: T, old: T, now: T, future: T,
                 time_base: Optional["TimeSeries4[float]"] = None):
        """
        Create a fully populated buffer.

        Args:
            old2: Value at t-3
            old: Value at t-2
            now: Value at t-1
            future: Value at t-0
            time_base: Buffer holding the time of each slot (None if
                derivatives are never requested)
        """
        self._samples = [as_sample(old2), as_sample(old), as_sample(now), as_sample(future)]
        self._time_base = time_base

    @classmethod
    def empty(cls, time_base: Optional["TimeSeries4[float]"] = None,
              fill=0.0) -> "TimeSeries4":
        """
        Create a buffer whose four slots all hold ``fill``.

        Used when the window is filled by subsequent ``advance`` calls. Pass
        ``numpy.zeros(3)`` as ``fill`` for a vector quantity.
        """
        return cls(fill, fill, fill, fill, time_base=time_base)

    # === Time base ===

    @property
    def time_base(self) -> Optional["TimeSeries4[float]"]:
        """Time buffer this series is bound to."""
        return self._time_base

    def _check_same_time_base(self, other: "TimeSeries4") -> None:
        if __debug__ and other._time_base is not self._time_base:
            raise TimeBaseMismatchError(
                "Cannot combine buffers bound to different time bases"
            )

    def _time_span(self, earlier: Slot, later: Slot) -> float:
        time_base = self._time_base
        if __debug__ and time_base is None:
            raise MissingTimeBaseError("Derivative requested from a buffer without a time base")
        span = time_base._samples[later] - time_base._samples[earlier]
        if __debug__ and span == 0:
            raise DegenerateTimeBaseError(
                f"Zero time span between slots {earlier.name} and {later.name}"
            )
        return span

    # === Mutation ===

    def assign(self, other: "TimeSeries4[T]") -> "TimeSeries4[T]":
        """
        Copy the four samples of ``other`` into this buffer.

        Both buffers must reference the identical time base; the time base of
        this buffer is left unchanged.

        Raises:
            TimeBaseMismatchError: If the time bases differ
        """
        self._check_same_time_base(other)
        self._samples = [as_sample(value) for value in other._samples]
        return self

    def advance(self, value: T) -> None:
        """
        Shift the window by one step and store ``value`` in the future slot.

        Must be called exactly once per time step, together with advancing
        the shared time base.
        """
        samples = self._samples
        samples[0] = samples[1]
        samples[1] = samples[2]
        samples[2] = samples[3]
        samples[3] = as_sample(value)

    # === Samples ===

    def sample_at(self, slot: Slot) -> T:
        """Return the value stored at ``slot``."""
        return self._samples[Slot(slot)]

    __getitem__ = sample_at

    @property
    def old2(self) -> T:
        """Value at t-3."""
        return self._samples[Slot.OLD2]

    @property
    def old(self) -> T:
        """Value at t-2."""
        return self._samples[Slot.OLD]

    @property
    def now(self) -> T:
        """Value at t-1."""
        return self._samples[Slot.NOW]

    @property
    def future(self) -> T:
        """Value at t-0."""
        return self._samples[Slot.FUTURE]

    def samples(self) -> Tuple[T, T, T, T]:
        """All four samples, oldest first."""
        return tuple(self._samples)

    def as_array(self) -> np.ndarray:
        """Samples stacked along a new first axis, oldest first."""
        return np.stack([np.asarray(value, dtype=float) for value in self._samples])

    # === Differences ===

    def dot_old(self) -> T:
        """
        Centered derivative at t-2 (slot ``old``).

        ``(now - old2) / (t_now - t_old2)``
        """
        return (self.now - self.old2) / self._time_span(Slot.OLD2, Slot.NOW)

    def dot_now(self) -> T:
        """
        Centered derivative at t-1 (slot ``now``).

        ``(future - old) / (t_future - t_old)``
        """
        return (self.future - self.old) / self._time_span(Slot.OLD, Slot.FUTURE)

    def delta_old(self) -> T:
        """Change over the most recent completed step, ``now - old``."""
        return self.now - self.old

    # === Transforms ===

    def map(self, func: Callable[[T], U],
            time_base=_SAME_TIME_BASE) -> "TimeSeries4[U]":
        """
        Apply ``func`` to every sample.

        Args:
            func: Function of a single sample
            time_base: Time base of the result (defaults to this buffer's)

        Returns:
            New buffer with the converted samples
        """
        if time_base is _SAME_TIME_BASE:
            time_base = self._time_base
        return TimeSeries4(*(func(value) for value in self._samples), time_base=time_base)

    def zip_map(self, other: "TimeSeries4", func: Callable) -> "TimeSeries4":
        """
        Combine this buffer with ``other`` slot by slot.

        Raises:
            TimeBaseMismatchError: If the two buffers use different time bases
        """
        self._check_same_time_base(other)
        return TimeSeries4(
            *(func(a, b) for a, b in zip(self._samples, other._samples)),
            time_base=self._time_base,
        )

    def copy(self) -> "TimeSeries4[T]":
        """Independent copy bound to the same time base."""
        return TimeSeries4(*self._samples, time_base=self._time_base)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._samples))

    def __len__(self) -> int:
        return 4

    def __repr__(self) -> str:
        values = ", ".join(
            f"{slot.name.lower()}={value!r}" for slot, value in zip(Slot, self._samples)
        )
        return f"TimeSeries4({values})"
