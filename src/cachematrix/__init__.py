"""
cachematrix
Memoized matrix inversion: a holder with a one-slot inverse cache and a
solver that fills it on first use.
"""

from .config import CacheMatrixConfig, configure_logging, get_config, load_config, set_config
from .errors import CacheMatrixError, ConfigError, SolveRecordError, UnknownInverterError
from .inverters import available_inverters, get_inverter, register_inverter, unregister_inverter
from .matrix import CacheableMatrix
from .solve import cache_solve

__all__ = [
    'CacheableMatrix', 'cache_solve',
    'CacheMatrixConfig', 'load_config', 'get_config', 'set_config', 'configure_logging',
    'available_inverters', 'get_inverter', 'register_inverter', 'unregister_inverter',
    'CacheMatrixError', 'ConfigError', 'SolveRecordError', 'UnknownInverterError',
]
