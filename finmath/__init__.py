'''
Deterministic financial math: time value of money, curves, decay scoring and
reverse DCF valuation with implied-rate search.

Every function is pure: no I/O, no shared state, no clock. Rates, margins,
horizons and half-lives are always explicit arguments.

Usage:
  from finmath.domain.types import ValuationInputs
  from finmath.engine.dcf import reverse_dcf
  from finmath.engine.root_finding import implied_discount_rate

  inputs = ValuationInputs(
      enterprise_value=1000.0, base_value=500.0, margin=0.15, tax_rate=0.25,
      capital_efficiency=0.5, discount_rate=0.10, stable_growth=0.03,
      horizon=10, trial_growth=0.08)
  result = reverse_dcf(inputs)
  print(f'Implied value: {result.implied_value:.2f}')

  rate = implied_discount_rate([100.0, 110.0, 121.0], target=272.73)
'''
