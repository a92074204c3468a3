"""
Uniform random number streams.

Provides the stream capability consumed by every distribution and random
variable: U(0,1) draws, bounded integers, reset to the start of the stream
or substream, substream advancement, and the antithetic option.

The concrete generator is L'Ecuyer's MRG32k3a (L'Ecuyer, Simard, Chen and
Kelton 2002, "An object-oriented random-number package with many long
streams and substreams"). All state arithmetic uses exact Python integers.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pysimrv.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

# Generator constants
M1 = 4294967087
M2 = 4294944443
A12 = 1403580
A13N = 810728
A21 = 527612
A23N = 1370589
NORM = 2.328306549295727688e-10  # 1 / (M1 + 1)

DEFAULT_SEED = (12345, 12345, 12345, 12345, 12345, 12345)

# Jump matrices: 2^76 steps (next substream) and 2^127 steps (next stream)
A1P76 = (
    (82758667, 1871391091, 4127413238),
    (3672831523, 69195019, 1871391091),
    (3672091415, 3528743235, 69195019),
)
A2P76 = (
    (1511326704, 3759209742, 1610795712),
    (4292754251, 1511326704, 3889917532),
    (3859662829, 4292754251, 3708466080),
)
A1P127 = (
    (2427906178, 3580155704, 949770784),
    (226153695, 1230515664, 3580155704),
    (1988835001, 986791581, 1230515664),
)
A2P127 = (
    (1464411153, 277697599, 1610723613),
    (32183930, 1464411153, 1022607788),
    (2824425944, 32183930, 2093834863),
)


def _mat_vec_mod(a: Sequence[Sequence[int]], s: Sequence[int], m: int) -> list[int]:
    return [sum(a[i][j] * s[j] for j in range(3)) % m for i in range(3)]


def _jump(seed: Sequence[int], a1: Sequence[Sequence[int]], a2: Sequence[Sequence[int]]) -> list[int]:
    return _mat_vec_mod(a1, seed[:3], M1) + _mat_vec_mod(a2, seed[3:], M2)


def check_seed(seed: Sequence[int]) -> None:
    """
    Validate an MRG32k3a seed.

    The seed is six non-negative integers. The first three must be below M1
    and not all zero; the last three must be below M2 and not all zero.
    """
    if seed is None:
        raise ValueError("seed must not be None")
    if len(seed) != 6:
        raise InvalidParameterError(f"seed must have 6 components, got {len(seed)}")
    for i, s in enumerate(seed):
        if int(s) != s or s < 0:
            raise InvalidParameterError(f"seed[{i}] must be a non-negative integer, got {s}")
        if i < 3 and s >= M1:
            raise InvalidParameterError(f"seed[{i}] must be < {M1}, got {s}")
        if i >= 3 and s >= M2:
            raise InvalidParameterError(f"seed[{i}] must be < {M2}, got {s}")
    if not any(seed[:3]):
        raise InvalidParameterError("first three seed components must not all be zero")
    if not any(seed[3:]):
        raise InvalidParameterError("last three seed components must not all be zero")


class RNStreamIfc(ABC):
    """
    Abstract uniform random number stream.

    Streams are callable: ``stream()`` is the same as ``stream.rand_u01()``.
    A stream is mutable state and must not be shared between threads
    without external synchronization.
    """

    @abstractmethod
    def rand_u01(self) -> float:
        """Next U(0,1) draw, strictly inside (0, 1)."""
        ...

    @property
    @abstractmethod
    def previous_u01(self) -> float:
        """The last value returned by rand_u01 (NaN before the first draw)."""
        ...

    @property
    @abstractmethod
    def antithetic(self) -> bool:
        """True when draws are reported as 1 - u."""
        ...

    @antithetic.setter
    @abstractmethod
    def antithetic(self, flag: bool) -> None: ...

    @abstractmethod
    def reset_start_stream(self) -> None:
        """Position the stream at the start of its first substream."""
        ...

    @abstractmethod
    def reset_start_substream(self) -> None:
        """Position the stream at the start of its current substream."""
        ...

    @abstractmethod
    def advance_to_next_substream(self) -> None:
        """Position the stream at the start of its next substream."""
        ...

    @abstractmethod
    def new_instance(self, name: str | None = None) -> RNStreamIfc:
        """A copy of this stream with identical state."""
        ...

    @abstractmethod
    def new_antithetic_instance(self, name: str | None = None) -> RNStreamIfc:
        """A copy of this stream with identical state and the antithetic flag flipped."""
        ...

    @property
    def name(self) -> str | None:
        return getattr(self, "_name", None)

    def rand_int(self, i: int, j: int) -> int:
        """Uniform integer in the closed range [i, j]."""
        if i > j:
            raise InvalidParameterError(f"lower limit {i} must be <= upper limit {j}")
        return i + int(self.rand_u01() * (j - i + 1))

    def rand_u01s(self, n: int) -> list[float]:
        """The next ``n`` U(0,1) draws."""
        return [self.rand_u01() for _ in range(n)]

    def __call__(self) -> float:
        return self.rand_u01()


class MRG32k3aStream(RNStreamIfc):
    """
    MRG32k3a combined multiple-recursive generator.

    Period is about 2^191. Each stream is split into substreams of length
    2^76. ``ig`` holds the stream start, ``bg`` the current substream start,
    ``cg`` the current state.
    """

    def __init__(self, seed: Sequence[int] = DEFAULT_SEED, name: str | None = None) -> None:
        check_seed(seed)
        self._name = name
        self._ig = [int(s) for s in seed]
        self._bg = list(self._ig)
        self._cg = list(self._ig)
        self._antithetic = False
        self._previous_u = math.nan

    def rand_u01(self) -> float:
        cg = self._cg
        p1 = (A12 * cg[1] - A13N * cg[0]) % M1
        cg[0], cg[1], cg[2] = cg[1], cg[2], p1
        p2 = (A21 * cg[5] - A23N * cg[3]) % M2
        cg[3], cg[4], cg[5] = cg[4], cg[5], p2

        u = (p1 - p2) * NORM if p1 > p2 else (p1 - p2 + M1) * NORM
        if self._antithetic:
            u = 1.0 - u
        self._previous_u = u
        return u

    @property
    def previous_u01(self) -> float:
        return self._previous_u

    @property
    def antithetic(self) -> bool:
        return self._antithetic

    @antithetic.setter
    def antithetic(self, flag: bool) -> None:
        self._antithetic = bool(flag)

    @property
    def state(self) -> tuple[int, ...]:
        """Current generator state as six integers."""
        return tuple(self._cg)

    @property
    def stream_seed(self) -> tuple[int, ...]:
        """Seed at the start of this stream."""
        return tuple(self._ig)

    def reset_start_stream(self) -> None:
        self._bg = list(self._ig)
        self._cg = list(self._ig)

    def reset_start_substream(self) -> None:
        self._cg = list(self._bg)

    def advance_to_next_substream(self) -> None:
        self._bg = _jump(self._bg, A1P76, A2P76)
        self._cg = list(self._bg)

    def new_instance(self, name: str | None = None) -> MRG32k3aStream:
        s = MRG32k3aStream(self._ig, name if name is not None else self._name)
        s._bg = list(self._bg)
        s._cg = list(self._cg)
        s._antithetic = self._antithetic
        return s

    def new_antithetic_instance(self, name: str | None = None) -> MRG32k3aStream:
        s = self.new_instance(name)
        s._antithetic = not self._antithetic
        return s

    def __repr__(self) -> str:
        return (
            f"MRG32k3aStream(name={self._name!r}, state={list(self._cg)}, "
            f"antithetic={self._antithetic})"
        )


class RNStreamFactory:
    """
    Source of successive independent MRG32k3a streams.

    Each stream handed out starts 2^127 steps after the previous one.
    """

    def __init__(self, seed: Sequence[int] = DEFAULT_SEED) -> None:
        check_seed(seed)
        self._initial_seed = [int(s) for s in seed]
        self._next_seed = list(self._initial_seed)
        self._stream_count = 0

    @property
    def stream_count(self) -> int:
        """Number of streams handed out since the last reset."""
        return self._stream_count

    def get_stream(self, name: str | None = None) -> MRG32k3aStream:
        """Create the next independent stream."""
        self._stream_count += 1
        if name is None:
            name = f"stream_{self._stream_count}"
        stream = MRG32k3aStream(self._next_seed, name)
        self._next_seed = _jump(self._next_seed, A1P127, A2P127)
        logger.debug("Created stream %s (#%d)", name, self._stream_count)
        return stream

    def advance_seeds(self, n: int) -> None:
        """Skip the next ``n`` streams."""
        if n < 0:
            raise InvalidParameterError(f"number of streams to skip must be >= 0, got {n}")
        for _ in range(n):
            self._next_seed = _jump(self._next_seed, A1P127, A2P127)

    def set_factory_seed(self, seed: Sequence[int]) -> None:
        """Restart the factory from a new seed."""
        check_seed(seed)
        self._initial_seed = [int(s) for s in seed]
        self.reset_factory_seed()

    def reset_factory_seed(self) -> None:
        """Rewind the factory so the next stream is the first one again."""
        self._next_seed = list(self._initial_seed)
        self._stream_count = 0


# Convenience factory for callers that do not supply a stream.
# Not thread-safe: threads should build their own RNStreamFactory.
_default_factory = RNStreamFactory()


def new_stream(name: str | None = None) -> MRG32k3aStream:
    """A fresh, unshared stream from the default factory."""
    return _default_factory.get_stream(name)


def get_default_factory() -> RNStreamFactory:
    """The module default factory used by ``new_stream``."""
    return _default_factory


def reset_default_factory() -> None:
    """Rewind the default factory. Call between independent runs."""
    _default_factory.reset_factory_seed()


class StreamControlMixin:
    """
    Stream-control passthroughs for objects bound to one stream.

    The host class stores its stream in ``self._stream``.
    """

    _stream: RNStreamIfc

    @property
    def stream(self) -> RNStreamIfc:
        """The bound uniform stream."""
        return self._stream

    @property
    def antithetic(self) -> bool:
        return self._stream.antithetic

    @antithetic.setter
    def antithetic(self, flag: bool) -> None:
        self._stream.antithetic = flag

    def reset_start_stream(self) -> None:
        self._stream.reset_start_stream()

    def reset_start_substream(self) -> None:
        self._stream.reset_start_substream()

    def advance_to_next_substream(self) -> None:
        self._stream.advance_to_next_substream()


def resolve_stream(stream: RNStreamIfc | None) -> RNStreamIfc:
    """Return ``stream``, or a fresh one from the default factory when None."""
    return stream if stream is not None else new_stream()
