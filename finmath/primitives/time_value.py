"""
Time value of money.

Closed-form discounting and compounding, discrete and continuous, plus the
analytic implied rate and the Gordon growth terminal-value multiple.

Key functions:
  present_value: FV / (1 + r)^n
  future_value: PV * (1 + r)^n
  implied_rate: (FV / PV)^(1/n) - 1, verified by re-compounding
"""

# pylint: disable=redefined-outer-name

from math import exp
from math import inf
from typing import Optional

from finmath.domain.errors import InvalidDomainError


def _growth_factor(rate: float, periods: float) -> float:
  """(1 + rate)^periods, rejecting a negative base with fractional periods."""
  base = 1.0 + rate
  if base < 0 and not float(periods).is_integer():
    raise InvalidDomainError(
        f'Invalid: rate {rate} gives a negative base for fractional '
        f'periods {periods}')
  try:
    return base**periods
  except OverflowError:
    # Odd whole periods keep the sign of a negative base.
    if base < 0 and int(periods) % 2 == 1:
      return -inf
    return inf


def terminal_value_multiple(discount_rate: float, stable_growth: float) -> float:
  """
  Gordon growth terminal value multiple.

  Formula: 1 / (discount_rate - stable_growth)

  Args:
    discount_rate: Discount rate (r)
    stable_growth: Perpetual growth rate (g)

  Returns:
    Multiple applied to next-period cash flow

  Raises:
    InvalidDomainError: If stable_growth >= discount_rate
  """
  if stable_growth >= discount_rate:
    raise InvalidDomainError(
        'Invalid: stable_growth must be < discount_rate for a valid '
        'perpetuity')
  return 1.0 / (discount_rate - stable_growth)


def present_value(future_value: float, rate: float, periods: float) -> float:
  """
  Discount a future value to present value.

  Formula: PV = FV / (1 + r)^n

  Args:
    future_value: Value at the end of `periods`
    rate: Discount rate per period
    periods: Number of periods (may be fractional)

  Returns:
    Present value

  Raises:
    InvalidDomainError: If rate == -1, or 1 + rate < 0 with fractional periods
  """
  if periods == 0:
    return future_value
  if rate == -1:
    raise InvalidDomainError('Invalid: rate cannot be -1 (division by zero)')
  return future_value / _growth_factor(rate, periods)


def future_value(present_value: float, rate: float, periods: float) -> float:
  """
  Compound a present value forward.

  Formula: FV = PV * (1 + r)^n

  Raises:
    InvalidDomainError: If 1 + rate < 0 with fractional periods
  """
  if periods == 0:
    return present_value
  return present_value * _growth_factor(rate, periods)


def present_value_continuous(future_value: float, rate: float,
                             time: float) -> float:
  """Continuous discounting: FV * e^(-r*t), +/-inf on overflow."""
  try:
    return future_value * exp(-rate * time)
  except OverflowError:
    return future_value * inf


def future_value_continuous(present_value: float, rate: float,
                            time: float) -> float:
  """Continuous compounding: PV * e^(r*t), +/-inf on overflow."""
  try:
    return present_value * exp(rate * time)
  except OverflowError:
    return present_value * inf


def implied_rate(
    present_value: float,
    future_value: float,
    periods: float,
    tolerance: float = 1e-9,
) -> Optional[float]:
  """
  Solve FV = PV * (1 + r)^n for r.

  The analytic solution is checked by compounding PV forward again; a result
  that misses `future_value` by more than `tolerance` is discarded.

  Args:
    present_value: Value today (must be > 0)
    future_value: Value after `periods` (must be > 0)
    periods: Number of periods
    tolerance: Absolute tolerance for the re-compounding check

  Returns:
    Implied rate per period, or None when no rate reconciles the values
  """
  if periods == 0:
    return 0.0 if present_value == future_value else None

  if present_value <= 0 or future_value <= 0:
    return None

  rate = (future_value / present_value)**(1.0 / periods) - 1.0

  recompounded = present_value * (1.0 + rate)**periods
  if abs(recompounded - future_value) < tolerance:
    return rate
  return None
