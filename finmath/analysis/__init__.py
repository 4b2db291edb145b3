'''Valuation analysis utilities.'''

from finmath.analysis.sensitivity import frange
from finmath.analysis.sensitivity import SensitivityTableBuilder

__all__ = [
    'SensitivityTableBuilder',
    'frange',
]
