#
# Collection of binning utility functions
#

# standard library imports
import logging
import os

# 3rd party library imports
from rich.logging import RichHandler

# local library imports
# none

LOGGER_NAME = 'binning'

# -v count to logging level, anything above 2 is treated as 2
VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: 19,
    2: logging.DEBUG,
}


def get_logger(module: str | None = None) -> logging.Logger:
    """
    Get the package logger, or the child logger of one module.

    Args:
        module: Module name such as 'scheme', None for the package logger.

    Returns:
        logging.Logger: The logging object.
    """
    if module:
        return logging.getLogger(f'{LOGGER_NAME}.{module}')
    return logging.getLogger(LOGGER_NAME)


def app_debug() -> bool:
    """
    Whether BINNING_APP_DEBUG=1 asks for detailed log records.
    """
    return os.environ.get('BINNING_APP_DEBUG', '').strip() == '1'


def configure_logging(verbose: int = 0) -> logging.Logger:
    """
    Send log records to a rich handler and set the package logger level
    from the number of -v flags: none shows warnings, one shows progress,
    two or more show debugging records.

    Level and source path are only shown when `app_debug()` is set.

    Args:
        verbose: Number of -v flags.

    Returns:
        logging.Logger: The package logger.
    """
    detailed = app_debug()
    handler = RichHandler(
        level=logging.NOTSET,
        show_level=detailed,
        show_time=True,
        show_path=detailed,
        omit_repeated_times=False,
    )

    # root logger stays at WARNING, basicConfig is a no-op once configured
    logging.basicConfig(
        level=logging.WARNING,
        format='%(message)s',
        datefmt=f'{LOGGER_NAME} [%X]',
        handlers=[handler],
    )

    log = get_logger()
    log.setLevel(VERBOSITY_LEVELS[min(max(verbose, 0), 2)])
    return log


def format_size(size: int) -> str:
    """
    Format a number of base pairs using the largest fitting unit.

    Args:
        size: Number of base pairs.

    Returns:
        A string such as '128 Kb' or '1 Mb'.
    """
    value, suffix = size, 'bp'
    for unit in ('Kb', 'Mb', 'Gb'):
        if value < 1024:
            break
        value, suffix = value / 1024, unit

    if value == int(value):
        return f'{int(value)} {suffix}'
    return f'{value:.1f} {suffix}'
