"""Domain types and errors for the finmath engine."""

from finmath.domain.errors import InvalidDomainError
from finmath.domain.types import DecaySignal
from finmath.domain.types import PeriodCashFlow
from finmath.domain.types import RootSearchInputs
from finmath.domain.types import RootSearchResult
from finmath.domain.types import ValuationInputs
from finmath.domain.types import ValuationResult

__all__ = [
    'InvalidDomainError',
    'ValuationInputs',
    'PeriodCashFlow',
    'ValuationResult',
    'RootSearchInputs',
    'RootSearchResult',
    'DecaySignal',
]
