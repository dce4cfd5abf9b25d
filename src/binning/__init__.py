from .exceptions import BinningError, BinningConfigError, BinningRangeError, BinningInvalidBinError, \
    BinningValueError
from .scheme import BinningScheme, LevelInfo, create, standard_scheme, extended_scheme, get_scheme
from .bins import bins, bin_info


__version__ = '1.0.0'
__author__ = 'binning contributors'


__all__ = ['BinningError', 'BinningConfigError', 'BinningRangeError', 'BinningInvalidBinError',
           'BinningValueError',
           'BinningScheme', 'LevelInfo', 'create', 'standard_scheme', 'extended_scheme', 'get_scheme',
           'bins', 'bin_info']
