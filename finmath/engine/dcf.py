"""
Reverse DCF math engine.

This module contains pure functions for reverse DCF calculations. No pandas,
no I/O, just numeric computations over ValuationInputs.

Key functions:
  project_cash_flows: Year-by-year free cash flow at a trial growth rate
  compute_terminal_value: Gordon growth terminal value and its present value
  reverse_dcf: Main entry point, implied enterprise value for one trial growth
"""

from math import isfinite

from finmath.domain.errors import InvalidDomainError
from finmath.domain.types import PeriodCashFlow
from finmath.domain.types import ValuationInputs
from finmath.domain.types import ValuationResult
from finmath.primitives.time_value import future_value
from finmath.primitives.time_value import present_value


def validate_inputs(inputs: ValuationInputs) -> None:
  """
  Reject inputs for which the valuation is undefined.

  Raises:
    InvalidDomainError: If any input other than enterprise_value is not
      finite, stable_growth >= discount_rate, discount_rate <= -1,
      base_value <= 0, or horizon is not a positive whole number
  """
  for name, value in inputs.to_dict().items():
    # enterprise_value does not enter the forward calculation.
    if name == 'enterprise_value':
      continue
    if not isfinite(value):
      raise InvalidDomainError(f'Invalid: {name} must be finite, got {value}')

  if inputs.stable_growth >= inputs.discount_rate:
    raise InvalidDomainError(
        'Invalid: stable_growth must be < discount_rate for a valid '
        'perpetuity')

  if inputs.discount_rate <= -1:
    raise InvalidDomainError('Invalid: discount_rate must be > -1')

  if inputs.base_value <= 0:
    raise InvalidDomainError('Invalid: base_value must be positive')

  if inputs.horizon <= 0:
    raise InvalidDomainError('Invalid: horizon must be positive')

  if not float(inputs.horizon).is_integer():
    raise InvalidDomainError(
        f'Invalid: horizon must be a whole number of periods, '
        f'got {inputs.horizon}')


def _base_value_at(inputs: ValuationInputs, t: int) -> float:
  return future_value(inputs.base_value, inputs.trial_growth, t)


def _period_cash_flow(inputs: ValuationInputs, t: int) -> PeriodCashFlow:
  """Cash flow figures for period t, from base values at t and t - 1."""
  base = _base_value_at(inputs, t)
  prior_base = _base_value_at(inputs, t - 1)

  nopat = base * inputs.margin * (1.0 - inputs.tax_rate)
  # Negative when the base shrinks: released capital adds to FCF.
  reinvestment = (base - prior_base) * inputs.capital_efficiency
  fcf = nopat - reinvestment

  return PeriodCashFlow(
      period=t,
      base_value=base,
      nopat=nopat,
      reinvestment=reinvestment,
      free_cash_flow=fcf,
      pv_free_cash_flow=present_value(fcf, inputs.discount_rate, t),
  )


def project_cash_flows(inputs: ValuationInputs) -> list[PeriodCashFlow]:
  """
  Project free cash flows over the explicit forecast.

  Args:
    inputs: Valuation inputs at one trial growth rate

  Returns:
    PeriodCashFlow for each period 1..horizon, in order

  Raises:
    InvalidDomainError: If the inputs fail validate_inputs
  """
  validate_inputs(inputs)
  horizon = int(inputs.horizon)
  return [_period_cash_flow(inputs, t) for t in range(1, horizon + 1)]


def terminal_period(inputs: ValuationInputs) -> PeriodCashFlow:
  """
  Cash flow figures for the final forecast period.

  Raises:
    InvalidDomainError: If the inputs fail validate_inputs
  """
  validate_inputs(inputs)
  return _period_cash_flow(inputs, int(inputs.horizon))


def compute_terminal_value(
    terminal_fcf: float,
    stable_growth: float,
    discount_rate: float,
    final_period: int,
) -> tuple[float, float]:
  """
  Compute terminal value using the Gordon Growth Model.

  Args:
    terminal_fcf: Free cash flow in the final explicit period
    stable_growth: Perpetual growth rate (g)
    discount_rate: Discount rate (r)
    final_period: Number of periods to discount back

  Returns:
    Tuple of (terminal_value, pv_terminal_value)

  Raises:
    InvalidDomainError: If stable_growth >= discount_rate
  """
  if stable_growth >= discount_rate:
    raise InvalidDomainError(
        'Invalid: stable_growth must be < discount_rate for a valid '
        'perpetuity')

  tv = terminal_fcf * (1.0 + stable_growth) / (discount_rate - stable_growth)
  pv_tv = present_value(tv, discount_rate, final_period)
  return tv, pv_tv


def reverse_dcf(inputs: ValuationInputs) -> ValuationResult:
  """
  Implied enterprise value for one trial growth rate.

  Stage 1: Explicit forecast, base value compounding at trial_growth
  Stage 2: Terminal value using Gordon Growth Model

  Run it across trial growth rates (see implied_growth_rate) to find the
  growth the target enterprise value prices in.

  Args:
    inputs: Valuation inputs

  Returns:
    ValuationResult with explicit and terminal components

  Raises:
    InvalidDomainError: If the inputs fail validate_inputs
  """
  periods = project_cash_flows(inputs)

  pv_explicit = 0.0
  for p in periods:
    pv_explicit += p.pv_free_cash_flow

  terminal = terminal_period(inputs)
  tv, pv_tv = compute_terminal_value(
      terminal_fcf=terminal.free_cash_flow,
      stable_growth=inputs.stable_growth,
      discount_rate=inputs.discount_rate,
      final_period=terminal.period,
  )

  return ValuationResult(
      pv_explicit=pv_explicit,
      terminal_fcf=terminal.free_cash_flow,
      terminal_value=tv,
      pv_terminal_value=pv_tv,
      implied_value=pv_explicit + pv_tv,
      periods=tuple(periods),
  )
