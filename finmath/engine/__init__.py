'''Reverse DCF engine and implied-rate search with pure math functions.'''

from finmath.engine.dcf import (
    compute_terminal_value,
    project_cash_flows,
    reverse_dcf,
    terminal_period,
    validate_inputs,
)
from finmath.engine.root_finding import (
    bisect,
    find_implied_discount_rate,
    implied_discount_rate,
    implied_growth_rate,
    present_value_of_series,
)

__all__ = [
    'bisect',
    'compute_terminal_value',
    'find_implied_discount_rate',
    'implied_discount_rate',
    'implied_growth_rate',
    'present_value_of_series',
    'project_cash_flows',
    'reverse_dcf',
    'terminal_period',
    'validate_inputs',
]
