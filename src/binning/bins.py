# http://genomewiki.ucsc.edu/index.php/Bin_indexing_system

# standard library imports
# none

# 3rd party library imports
from rich.console import Console
from rich.table import Table

# local library imports
from binning.exceptions import BinningValueError
from binning.scheme import BinningScheme, standard_scheme
import binning.utils as binning_utils

# for BED (0-based, half-open) or GFF (1-based, closed intervals)
COORD_OFFSETS = {'bed': 0, 'gff': 1}


def bins(
        start: int,
        stop: int,
        fmt: str = 'gff',
        one: bool = True,
        scheme: BinningScheme | None = None,
) -> int | set[int]:
    """
    Uses the definition of a "genomic bin" described in Fig 7 of
    http://genome.cshlp.org/content/12/6/996.abstract.

    Args:
        start: Start coordinate.
        stop: End coordinate.
        fmt: 'gff' for 1-based closed coordinates or 'bed' for 0-based
            half-open coordinates.
        one: If True (default), only return the smallest bin that completely
            contains these coordinates (useful for assigning a single bin).
            If False, return the set of *all* bins that overlap these
            coordinates (useful for looking for features that could
            intersect).
        scheme: The binning scheme, the standard scheme if None.

    Returns:
        A bin number if `one`, else a set of bin numbers.

    Raises:
        BinningValueError: If `fmt` is unknown.
        BinningRangeError: If the coordinates are outside the scheme.
    """
    try:
        coord_offset = COORD_OFFSETS[fmt.lower()]
    except KeyError:
        raise BinningValueError(
            f"Unknown coordinate format '{fmt}', must be 'bed' or 'gff'"
        )

    scheme = scheme or standard_scheme()

    # a closed 1-based end is the same number as a half-open 0-based stop
    start -= coord_offset

    if one:
        return scheme.assign(start, stop)
    return set(scheme.overlapping(start, stop))


def bin_info(
        scheme: BinningScheme | None = None,
        console: Console | None = None,
) -> None:
    """
    Useful for debugging: how large is each bin, and what are the bin IDs?

    Args:
        scheme: The binning scheme, the standard scheme if None.
        console: Where to print, a new rich Console if None.
    """
    scheme = scheme or standard_scheme()
    console = console or Console()

    table = Table(title=f'max position {scheme.max_position:,}')
    table.add_column('level', justify='right')
    table.add_column('#bins', justify='right')
    table.add_column('start', justify='right')
    table.add_column('end', justify='right')
    table.add_column('size', justify='right')
    table.add_column('', justify='right')

    for info in scheme.levels():
        table.add_row(
            str(info.level),
            str(info.number_of_bins),
            str(info.first_bin),
            str(info.last_bin),
            f'{info.bin_size} bp',
            f'({binning_utils.format_size(info.bin_size)})',
        )

    console.print(table)
