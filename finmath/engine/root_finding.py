"""
Bounded bisection search for implied rates.

Two searches share one bisection routine:
  find_implied_discount_rate: discount rate at which a cash-flow series has a
    target present value
  implied_growth_rate: trial growth at which reverse_dcf reaches the
    enterprise value in ValuationInputs

Bisection relies on the caller's bracket containing a monotonic crossing of
the target. The bracket is not checked before searching; a target that cannot
be reached simply exhausts the iteration budget and comes back as
RootSearchResult(rate=None). SearchConfig.check_bracket adds a diagnostic
without changing that outcome.
"""

from collections.abc import Callable, Sequence
import logging
from math import copysign
from math import inf
from math import isfinite
from math import nan
from typing import Any, Optional

from finmath.domain.errors import InvalidDomainError
from finmath.domain.types import RootSearchInputs
from finmath.domain.types import RootSearchResult
from finmath.domain.types import ValuationInputs
from finmath.engine.dcf import reverse_dcf
from finmath.engine.dcf import validate_inputs
from finmath.primitives.time_value import present_value
from finmath.search.config import SearchConfig

logger = logging.getLogger(__name__)


def present_value_of_series(cash_flows: Sequence[float], rate: float) -> float:
  """
  Present value of cash flows received at the end of periods 1..N.

  Formula: sum(cf[i] / (1 + rate)^(i + 1))

  An empty series is worth 0.0 at every rate. At rate -1 every non-zero
  term is +/-inf (a zero flow is nan) rather than an error, so a search
  whose midpoint lands there keeps going.
  """
  total = 0.0
  for t, cf in enumerate(cash_flows, start=1):
    total += _discounted_term(cf, rate, t)
  return total


def _discounted_term(cf: float, rate: float, t: int) -> float:
  if rate == -1:
    return copysign(inf, cf) if cf != 0 else nan
  return present_value(cf, rate, t)


def _bracket_diag(
    evaluate: Callable[[float], float],
    target: float,
    config: SearchConfig,
) -> dict[str, Any]:
  """Values at both ends of the bracket and whether they straddle target."""
  value_low = evaluate(config.low)
  value_high = evaluate(config.high)
  bracketed = min(value_low, value_high) <= target <= max(value_low, value_high)
  if not bracketed:
    logger.warning(
        'Target %.6g not bracketed by [%.6g, %.6g] on [%.6g, %.6g]; '
        'bisection is unlikely to converge', target, value_low, value_high,
        config.low, config.high)
  return {
      'value_low': value_low,
      'value_high': value_high,
      'bracketed': bracketed,
  }


def bisect(
    evaluate: Callable[[float], float],
    target: float,
    config: SearchConfig,
    increasing: bool = False,
) -> RootSearchResult:
  """
  Bisection for x in [config.low, config.high] with evaluate(x) ~= target.

  Each iteration evaluates the midpoint and returns it as soon as
  |evaluate(mid) - target| < tolerance. Otherwise the bracket is halved
  on the side implied by the direction of evaluate.

  Args:
    evaluate: Function to match against target
    target: Value to reach
    config: Bracket, tolerance and iteration budget
    increasing: True if evaluate rises with x, False if it falls

  Returns:
    RootSearchResult. rate is None when max_iterations midpoints all miss the
    tolerance.
  """
  diag: dict[str, Any] = {
      'search_method': 'bisection',
      'low': config.low,
      'high': config.high,
      'tolerance': config.tolerance,
      'max_iterations': config.max_iterations,
  }
  if config.check_bracket:
    diag.update(_bracket_diag(evaluate, target, config))

  low = config.low
  high = config.high
  residual: Optional[float] = None

  for i in range(1, config.max_iterations + 1):
    mid = (low + high) / 2.0
    value = evaluate(mid)
    residual = value - target

    if abs(residual) < config.tolerance:
      logger.debug('Bisection converged to %.10g after %d iterations', mid, i)
      diag.update({'converged': True, 'residual': residual})
      return RootSearchResult(rate=mid, iterations=i, diag=diag)

    # Value above target means x is too low when decreasing, too high when
    # increasing.
    if (value > target) != increasing:
      low = mid
    else:
      high = mid

  logger.debug('Bisection exhausted %d iterations, last residual %s',
               config.max_iterations, residual)
  diag.update({
      'converged': False,
      'residual': residual,
      'final_bracket': (low, high),
  })
  return RootSearchResult(rate=None,
                          iterations=config.max_iterations,
                          diag=diag)


def find_implied_discount_rate(inputs: RootSearchInputs) -> RootSearchResult:
  """
  Discount rate at which the cash flows are worth inputs.target.

  Present value falls as the rate rises (for a positive-PV series), so a
  midpoint worth more than the target moves the lower bound up.

  Args:
    inputs: Cash flows, target present value and search configuration

  Returns:
    RootSearchResult with the implied rate, or rate=None if not found
  """
  cash_flows = inputs.cash_flows
  result = bisect(
      evaluate=lambda rate: present_value_of_series(cash_flows, rate),
      target=inputs.target,
      config=inputs.config,
      increasing=False,
  )
  result.diag['n_cash_flows'] = len(cash_flows)
  return result


def implied_discount_rate(
    cash_flows: Sequence[float],
    target: float,
    low: float = 0.001,
    high: float = 0.50,
    tolerance: float = 1e-6,
    max_iterations: int = 100,
) -> Optional[float]:
  """
  Implied discount rate for a cash-flow series, or None.

  Convenience wrapper over find_implied_discount_rate taking the search
  settings as keyword arguments.

  Args:
    cash_flows: Cash flows for periods 1..N (may be empty)
    target: Present value to match
    low: Lower end of the search bracket
    high: Upper end of the search bracket
    tolerance: Absolute tolerance on present value
    max_iterations: Maximum number of bisection steps

  Returns:
    Implied rate, or None if no rate was found within the budget
  """
  config = SearchConfig(low=low,
                        high=high,
                        tolerance=tolerance,
                        max_iterations=max_iterations)
  return find_implied_discount_rate(
      RootSearchInputs.from_sequence(cash_flows, target, config)).rate


def implied_growth_rate(
    inputs: ValuationInputs,
    config: Optional[SearchConfig] = None,
) -> RootSearchResult:
  """
  Trial growth rate at which reverse_dcf reaches inputs.enterprise_value.

  inputs.trial_growth is ignored; the bracket comes from config. Implied
  value rises with growth for positive-margin configurations, so a midpoint
  worth more than the target moves the upper bound down. Choose a bracket
  on which that holds: at high growth, reinvestment can outrun operating
  profit and implied value turns down again.

  Args:
    inputs: Valuation inputs with the target enterprise value
    config: Search configuration (default: SearchConfig.default())

  Returns:
    RootSearchResult whose rate is the implied growth, or None

  Raises:
    InvalidDomainError: If the inputs fail validation or enterprise_value
      is not finite
  """
  if config is None:
    config = SearchConfig.default()

  validate_inputs(inputs)
  if not isfinite(inputs.enterprise_value):
    raise InvalidDomainError(
        f'Invalid: enterprise_value must be finite, got '
        f'{inputs.enterprise_value}')

  result = bisect(
      evaluate=lambda g: reverse_dcf(inputs.with_trial_growth(g)).implied_value,
      target=inputs.enterprise_value,
      config=config,
      increasing=True,
  )
  result.diag['target_enterprise_value'] = inputs.enterprise_value
  return result
