"""
The interval binning scheme.

Implements the hierarchical binning of Fig 7 in
http://genome.cshlp.org/content/12/6/996.abstract, as used by the UCSC
Genome Browser: http://genomewiki.ucsc.edu/index.php/Bin_indexing_system

Every interval is assigned the smallest bin that completely contains it.
Storing that number next to the interval turns an overlap query into a
lookup of a handful of bin numbers followed by a plain start/stop check,
which mimics an R-tree index: https://en.wikipedia.org/wiki/R-tree

For the standard scheme the hierarchy looks like this:

    level  #bins  first  last  bin size
    0      4096   585    4680  128 Kb
    1      512    73     584   1 Mb
    2      64     9      72    8 Mb
    3      8      1      8     64 Mb
    4      1      0      0     512 Mb

All positions and intervals are zero-based and half-open, like Python
slices.
"""

# standard library imports
import collections
from functools import lru_cache
from typing import Iterator, Sequence

# 3rd party library imports
# none

# local library imports
from binning.exceptions import BinningConfigError
from binning.exceptions import BinningError
from binning.exceptions import BinningInvalidBinError
from binning.exceptions import BinningRangeError
from binning.exceptions import BinningValueError
import binning.utils as binning_utils

level_fields = [
    'level', 'offset', 'first_bin', 'last_bin', 'number_of_bins', 'bin_size'
]
LevelInfo = collections.namedtuple('LevelInfo', level_fields)

# module logger
logger = binning_utils.get_logger('scheme')


class BinningScheme:
    """
    A specific interval binning scheme.

    Levels are stored from the finest (smallest bins, highest offset) to the
    coarsest (a single root bin numbered 0). Offsets strictly decrease towards
    the root, so a bin number is always larger than the number of any bin on
    a coarser level. `containing` and `contained` depend on this ordering to
    tell finer from coarser bins by value alone; a scheme numbering the root
    level last would need explicit level bookkeeping there instead.

    Attributes:
        max_position (int): Largest position that can be binned; the largest
            valid stop is max_position + 1.
        max_bin (int): Largest valid bin number.
        level_offsets (tuple[int, ...]): First bin number per level, finest
            level first.
        shift_first (int): How much to shift to get to the finest bin.
        shift_next (int): How much to shift to get to the next larger bin.
    """

    __slots__ = (
        '_max_position', '_max_bin', '_level_offsets', '_shift_first',
        '_shift_next'
    )

    def __init__(
            self,
            max_position: int,
            level_offsets: Sequence[int],
            shift_first: int,
            shift_next: int,
    ) -> None:
        """
        Initialize a new binning scheme.

        Args:
            max_position: The maximum position that can be binned.
            level_offsets: The first bin number per level, finest level first
                and ending with the root level at 0.
            shift_first: How much to shift to get to the smallest bin.
            shift_next: How much to shift to get to the next larger bin.

        Raises:
            BinningConfigError: If the configuration does not describe a
                consistent hierarchy.
        """
        level_offsets = tuple(level_offsets)
        _validate(max_position, level_offsets, shift_first, shift_next)

        self._max_position = max_position
        self._level_offsets = level_offsets
        self._shift_first = shift_first
        self._shift_next = shift_next
        self._max_bin = level_offsets[0] + (max_position >> shift_first)

        logger.debug(
            f'Binning scheme with {len(level_offsets)} levels, '
            f'max position {max_position}, max bin {self._max_bin}'
        )

    @property
    def max_position(self) -> int:
        return self._max_position

    @property
    def max_bin(self) -> int:
        return self._max_bin

    @property
    def level_offsets(self) -> tuple[int, ...]:
        return self._level_offsets

    @property
    def shift_first(self) -> int:
        return self._shift_first

    @property
    def shift_next(self) -> int:
        return self._shift_next

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinningScheme):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f'BinningScheme(max_position={self._max_position}, '
            f'level_offsets={list(self._level_offsets)}, '
            f'shift_first={self._shift_first}, '
            f'shift_next={self._shift_next})'
        )

    def _key(self) -> tuple:
        return (
            self._max_position, self._level_offsets, self._shift_first,
            self._shift_next
        )

    def level_ranges(self, start: int, stop: int) -> Iterator[tuple[int, int]]:
        """
        Get the first and last bin overlapping the interval start:stop for
        each level, starting with the smallest bins.

        Algorithm by Jim Kent:
        http://genomewiki.ucsc.edu/index.php/Bin_indexing_system

        The interval is validated right away, the bins are produced lazily.
        An empty or inverted interval (stop <= start) is treated as the
        single position start:start+1 instead of being rejected. The start
        must therefore be an actual position, at most max_position.

        Args:
            start: Start of the interval (0-based, inclusive).
            stop: Stop of the interval (0-based, exclusive).

        Returns:
            An iterator over (first_bin, last_bin) pairs, one per level,
            ending with (0, 0) for the root level.

        Raises:
            BinningRangeError: If the interval is outside 0:max_position+1
                or start is past max_position.
        """
        if (start < 0 or start > self._max_position
                or stop > self._max_position + 1):
            raise BinningRangeError(start, stop, self._max_position)
        if stop <= start:
            stop = start + 1

        return self._walk_levels(
            start >> self._shift_first, (stop - 1) >> self._shift_first
        )

    def _walk_levels(
            self, start_bin: int, stop_bin: int
    ) -> Iterator[tuple[int, int]]:
        for level, offset in enumerate(self._level_offsets):
            if level > 0:
                start_bin >>= self._shift_next
                stop_bin >>= self._shift_next
            yield offset + start_bin, offset + stop_bin

    def assign(self, start: int, stop: int) -> int:
        """
        Get the smallest bin fitting the interval start:stop.

        Args:
            start: Start of the interval (0-based, inclusive).
            stop: Stop of the interval (0-based, exclusive).

        Returns:
            The bin number.

        Raises:
            BinningRangeError: If the interval is outside 0:max_position+1.
        """
        for first_bin, last_bin in self.level_ranges(start, stop):
            # going from smallest to largest bins, the first level where
            # both ends fall into the same bin is the smallest fit
            if first_bin == last_bin:
                return first_bin

        # the root level always yields (0, 0)
        raise BinningError('unexpected loop fall-through')

    def overlapping(self, start: int, stop: int) -> list[int]:
        """
        Get the bins of all intervals overlapping the interval start:stop by
        at least one position.

        Bins are ordered by level, smallest bins first, and ascending within
        a level.

        Args:
            start: Start of the interval (0-based, inclusive).
            stop: Stop of the interval (0-based, exclusive).

        Returns:
            A list of bin numbers.

        Raises:
            BinningRangeError: If the interval is outside 0:max_position+1.
        """
        bins = []
        for first_bin, last_bin in self.level_ranges(start, stop):
            bins.extend(range(first_bin, last_bin + 1))

        logger.debug(f'{len(bins)} bins overlapping {start}-{stop}')
        return bins

    def containing(self, start: int, stop: int) -> list[int]:
        """
        Get the bins of all intervals completely containing the interval
        start:stop.

        These are the assigned bin and all of its ancestors, which are
        exactly the overlapping bins numbered at most the assigned bin.

        Args:
            start: Start of the interval (0-based, inclusive).
            stop: Stop of the interval (0-based, exclusive).

        Returns:
            A list of bin numbers, ordered like `overlapping`.

        Raises:
            BinningRangeError: If the interval is outside 0:max_position+1.
        """
        max_bin = self.assign(start, stop)
        return [b for b in self.overlapping(start, stop) if b <= max_bin]

    def contained(self, start: int, stop: int) -> list[int]:
        """
        Get the bins of all intervals completely contained by the interval
        start:stop.

        Note that the assigned bin itself is included, so this is the set of
        bins whose intervals can lie within start:stop, not a guarantee that
        they do.

        Args:
            start: Start of the interval (0-based, inclusive).
            stop: Stop of the interval (0-based, exclusive).

        Returns:
            A list of bin numbers, ordered like `overlapping`.

        Raises:
            BinningRangeError: If the interval is outside 0:max_position+1.
        """
        min_bin = self.assign(start, stop)
        return [b for b in self.overlapping(start, stop) if b >= min_bin]

    def covered(self, bin: int) -> tuple[int, int]:
        """
        Get the interval covered by a bin.

        This is always the full span of the bin. When max_position + 1 is
        not a multiple of a level's bin size, the last bin of that level
        reaches past max_position + 1, and assigning its covered interval
        raises BinningRangeError.

        Args:
            bin: The bin number.

        Returns:
            A (start, stop) tuple, 0-based and half-open.

        Raises:
            BinningInvalidBinError: If bin is not a bin of this scheme (see
                `level_of`).
        """
        level = self.level_of(bin)
        offset = self._level_offsets[level]
        shift = self._shift_first + level * self._shift_next
        return (bin - offset) << shift, (bin + 1 - offset) << shift

    def level_of(self, bin: int) -> int:
        """
        Get the level of a bin, 0 being the level of the smallest bins.

        Args:
            bin: The bin number.

        Returns:
            The level index into `level_offsets`.

        Raises:
            BinningInvalidBinError: If bin is < 0 or > max_bin, or falls in
                the unused numbers between the last bin of a level and the
                offset of the next finer level.
        """
        if bin < 0 or bin > self._max_bin:
            raise BinningInvalidBinError(bin, self._max_bin)

        for level, offset in enumerate(self._level_offsets):
            if offset <= bin:
                shift = self._shift_first + level * self._shift_next
                if bin - offset > self._max_position >> shift:
                    raise BinningInvalidBinError(bin, self._max_bin, level)
                return level

        # the root offset is 0
        raise BinningError('unexpected loop fall-through')

    def levels(self) -> list[LevelInfo]:
        """
        Describe every level of the hierarchy, smallest bins first.

        Returns:
            A list of LevelInfo records.
        """
        info = []
        for level, offset in enumerate(self._level_offsets):
            shift = self._shift_first + level * self._shift_next
            number_of_bins = (self._max_position >> shift) + 1
            info.append(
                LevelInfo(
                    level=level,
                    offset=offset,
                    first_bin=offset,
                    last_bin=offset + number_of_bins - 1,
                    number_of_bins=number_of_bins,
                    bin_size=1 << shift,
                )
            )
        return info


def _validate(
        max_position: int,
        level_offsets: tuple[int, ...],
        shift_first: int,
        shift_next: int,
) -> None:
    if not level_offsets:
        raise BinningConfigError('At least one level offset is required')
    if level_offsets[-1] != 0:
        raise BinningConfigError(
            f'Last level offset must be 0, not {level_offsets[-1]}'
        )
    for finer, coarser in zip(level_offsets, level_offsets[1:]):
        if finer <= coarser:
            raise BinningConfigError(
                f'Level offsets must be strictly decreasing: {list(level_offsets)}'
            )
    if shift_first <= 0 or shift_next <= 0:
        raise BinningConfigError(
            f'Shifts must be positive, not {shift_first} and {shift_next}'
        )
    if max_position < 0:
        raise BinningConfigError(
            f'Illegal value for max position {max_position}, must be >= 0'
        )

    # each level must fit below the offset of the next finer level
    for level in range(1, len(level_offsets)):
        shift = shift_first + level * shift_next
        number_of_bins = (max_position >> shift) + 1
        if level_offsets[level] + number_of_bins > level_offsets[level - 1]:
            raise BinningConfigError(
                f'Level {level} needs {number_of_bins} bins from offset '
                f'{level_offsets[level]}, overlapping level {level - 1} '
                f'at offset {level_offsets[level - 1]}'
            )

    root_shift = shift_first + (len(level_offsets) - 1) * shift_next
    if max_position >> root_shift:
        raise BinningConfigError(
            f'Max position {max_position} does not fit in a single root bin '
            f'of {1 << root_shift} positions'
        )


def create(
        max_position: int,
        level_offsets: Sequence[int],
        shift_first: int,
        shift_next: int,
) -> BinningScheme:
    """
    Create a new binning scheme.

    Args:
        max_position: The maximum position that can be binned.
        level_offsets: The first bin number per level, smallest bins first.
        shift_first: How much to shift to get to the smallest bin.
        shift_next: How much to shift to get to the next larger bin.

    Returns:
        The BinningScheme.

    Raises:
        BinningConfigError: If the configuration is malformed.
    """
    return BinningScheme(max_position, level_offsets, shift_first, shift_next)


@lru_cache(maxsize=None)
def standard_scheme() -> BinningScheme:
    """
    The standard binning scheme used by the UCSC Genome Browser, covering
    positions >= 0 and <= 2^29-1 (enough for the longest human chromosome).

    Returns:
        The (shared) standard BinningScheme.
    """
    return BinningScheme(
        (1 << 29) - 1, [512 + 64 + 8 + 1, 64 + 8 + 1, 8 + 1, 1, 0], 17, 3
    )


@lru_cache(maxsize=None)
def extended_scheme() -> BinningScheme:
    """
    A six level variant of the standard scheme covering positions >= 0 and
    <= 2^32-1. Bin numbers of intervals that fit in 512 Mb differ from the
    standard scheme.

    Returns:
        The (shared) extended BinningScheme.
    """
    return BinningScheme(
        (1 << 32) - 1,
        [4096 + 512 + 64 + 8 + 1, 512 + 64 + 8 + 1, 64 + 8 + 1, 8 + 1, 1, 0],
        17,
        3,
    )


SCHEMES = {
    'standard': standard_scheme,
    'extended': extended_scheme,
}


def get_scheme(name: str) -> BinningScheme:
    """
    Get a predefined binning scheme by name.

    Args:
        name: 'standard' or 'extended' (case-insensitive).

    Returns:
        The BinningScheme.

    Raises:
        BinningValueError: If there is no scheme by that name.
    """
    try:
        return SCHEMES[name.lower()]()
    except KeyError:
        raise BinningValueError(
            f"Unknown binning scheme '{name}', "
            f"must be one of {', '.join(SCHEMES)}"
        )
