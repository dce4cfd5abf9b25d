# standard library imports
from enum import Enum
from typing import Annotated, Callable
import importlib.metadata

# 3rd party library imports
import typer

# local library imports
from binning.bins import bin_info
import binning.exceptions as exceptions
import binning.scheme as binning_scheme
import binning.utils as binning_utils


class SchemeEnum(str, Enum):
    STANDARD = 'standard'
    EXTENDED = 'extended'

app = typer.Typer(help='UCSC interval binning')

SchemeOption = Annotated[SchemeEnum, typer.Option('-s', '--scheme', help='Binning scheme', case_sensitive=False)]
VerboseOption = Annotated[int, typer.Option('-v', '--verbose', show_default=False, count=True, help='specify multiple times for more verbose output')]
StartArgument = Annotated[int, typer.Argument(show_default=False, help='Start of the interval (0-based, inclusive)')]
StopArgument = Annotated[int, typer.Argument(show_default=False, help='Stop of the interval (0-based, exclusive)')]


def version_callback(value: bool):
    if value:
        version = importlib.metadata.version('binning')
        typer.echo(f'binning {version}')
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    version: bool = typer.Option(None, '--version', callback=version_callback),
):
    pass


def run_query(name: str, query: Callable[[], object], verbose: int) -> None:
    """
    Run a query and print its result: lists space separated, tuples tab
    separated.

    Args:
        name: The command name, for logging.
        query: Callable returning the result to print.
        verbose: Verbosity level for `configure_logging`.
    """
    logger = binning_utils.configure_logging(verbose)
    logger.debug(name)

    try:
        result = query()
    except exceptions.BinningError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    if isinstance(result, (list, tuple)):
        sep = '\t' if isinstance(result, tuple) else ' '
        typer.echo(sep.join(str(r) for r in result))
    else:
        typer.echo(str(result))


# #############################################################################
#
# info
#
# #############################################################################
@app.command(help='Show the levels of a binning scheme')
def info(
    scheme: SchemeOption = SchemeEnum.STANDARD,
    verbose: VerboseOption = 0
) -> None:
    """
    Show the levels of a binning scheme
    """
    logger = binning_utils.configure_logging(verbose)
    logger.debug('info')

    bin_info(binning_scheme.get_scheme(scheme.value))


# #############################################################################
#
# interval queries
#
# #############################################################################
@app.command(help='Smallest bin fitting an interval')
def assign(
    start: StartArgument,
    stop: StopArgument,
    scheme: SchemeOption = SchemeEnum.STANDARD,
    verbose: VerboseOption = 0
) -> None:
    s = binning_scheme.get_scheme(scheme.value)
    run_query('assign', lambda: s.assign(start, stop), verbose)


@app.command(help='Bins of all intervals overlapping an interval')
def overlapping(
    start: StartArgument,
    stop: StopArgument,
    scheme: SchemeOption = SchemeEnum.STANDARD,
    verbose: VerboseOption = 0
) -> None:
    s = binning_scheme.get_scheme(scheme.value)
    run_query('overlapping', lambda: s.overlapping(start, stop), verbose)


@app.command(help='Bins of all intervals containing an interval')
def containing(
    start: StartArgument,
    stop: StopArgument,
    scheme: SchemeOption = SchemeEnum.STANDARD,
    verbose: VerboseOption = 0
) -> None:
    s = binning_scheme.get_scheme(scheme.value)
    run_query('containing', lambda: s.containing(start, stop), verbose)


@app.command(help='Bins of all intervals contained by an interval')
def contained(
    start: StartArgument,
    stop: StopArgument,
    scheme: SchemeOption = SchemeEnum.STANDARD,
    verbose: VerboseOption = 0
) -> None:
    s = binning_scheme.get_scheme(scheme.value)
    run_query('contained', lambda: s.contained(start, stop), verbose)


# #############################################################################
#
# covered
#
# #############################################################################
@app.command(help='Interval covered by a bin')
def covered(
    bin: Annotated[int, typer.Argument(show_default=False, help='Bin number')],
    scheme: SchemeOption = SchemeEnum.STANDARD,
    verbose: VerboseOption = 0
) -> None:
    s = binning_scheme.get_scheme(scheme.value)
    run_query('covered', lambda: s.covered(bin), verbose)
