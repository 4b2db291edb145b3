"""
Sensitivity analysis for reverse DCF valuation.

This module builds 2D tables showing how implied enterprise value varies
across discount rates and trial growth rates, and the break-even growth
(the growth the target enterprise value prices in) per discount rate.

Usage:
  builder = SensitivityTableBuilder(inputs)
  table = builder.build(
      discount_rates=frange(0.08, 0.12, 0.01),
      growth_rates=[0.04, 0.06, 0.08, 0.10],
  )
"""

import logging
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from finmath.domain.types import ValuationInputs
from finmath.engine.dcf import reverse_dcf
from finmath.engine.root_finding import implied_growth_rate
from finmath.search.config import SearchConfig

logger = logging.getLogger(__name__)


class SensitivityTableBuilder:
  """
  Build sensitivity tables around one set of valuation inputs.

  Varies discount rate and trial growth rate while keeping margin, tax,
  capital efficiency, stable growth and horizon fixed.
  """

  def __init__(self, base_inputs: ValuationInputs):
    """
    Initialize sensitivity table builder.

    Args:
        base_inputs: Valuation inputs held fixed apart from the varied rates
    """
    self.base_inputs = base_inputs

    logger.info('Initialized SensitivityTableBuilder')
    logger.info('  Base value: %.2f', base_inputs.base_value)
    logger.info('  Margin: %.2f%%', base_inputs.margin * 100)
    logger.info('  Stable growth: %.2f%%', base_inputs.stable_growth * 100)
    logger.info('  Horizon: %d', base_inputs.horizon)

  def build(
      self,
      discount_rates: Sequence[float],
      growth_rates: Sequence[float],
  ) -> pd.DataFrame:
    """
    Build 2D table of implied enterprise value.

    Args:
        discount_rates: Discount rates (rows), each above stable growth
        growth_rates: Trial growth rates (columns)

    Returns:
        DataFrame with discount rates as index, growth rates as columns,
        and implied enterprise values as cell values

    Raises:
        ValueError: If either rate list is empty
        InvalidDomainError: If a discount rate is at or below stable growth
    """
    if len(discount_rates) == 0:
      raise ValueError('discount_rates cannot be empty')
    if len(growth_rates) == 0:
      raise ValueError('growth_rates cannot be empty')

    logger.info('Building sensitivity table: %d x %d', len(discount_rates),
                len(growth_rates))

    values = np.empty((len(discount_rates), len(growth_rates)))
    for i, r in enumerate(discount_rates):
      rate_inputs = self.base_inputs.with_discount_rate(r)
      for j, g in enumerate(growth_rates):
        values[i, j] = reverse_dcf(
            rate_inputs.with_trial_growth(g)).implied_value

    r_labels = [f'{r:.1%}' for r in discount_rates]
    g_labels = [f'{g:.1%}' for g in growth_rates]

    df = pd.DataFrame(values, index=r_labels, columns=g_labels)
    df.index.name = 'Discount Rate'
    df.columns.name = 'Trial Growth'

    logger.info('Sensitivity table built successfully')
    return df

  def breakeven_growth(
      self,
      discount_rates: Sequence[float],
      config: Optional[SearchConfig] = None,
  ) -> pd.Series:
    """
    Growth rate implied by the target enterprise value at each discount rate.

    Args:
        discount_rates: Discount rates to solve at
        config: Growth search configuration (default: SearchConfig.default())

    Returns:
        Series indexed by discount rate label. NaN where the search found no
        growth rate within its budget.
    """
    if len(discount_rates) == 0:
      raise ValueError('discount_rates cannot be empty')

    implied = []
    for r in discount_rates:
      result = implied_growth_rate(self.base_inputs.with_discount_rate(r),
                                   config)
      if result.rate is None:
        logger.info('No implied growth at discount rate %.2f%%', r * 100)
      implied.append(np.nan if result.rate is None else result.rate)

    series = pd.Series(implied,
                       index=[f'{r:.1%}' for r in discount_rates],
                       name='Implied Growth',
                       dtype=float)
    series.index.name = 'Discount Rate'
    return series


def frange(start: float, stop: float, step: float) -> list[float]:
  """
  Inclusive float range with rounding.

  Args:
      start: Start value
      stop: Stop value (inclusive)
      step: Step size

  Returns:
      List of floats from start to stop (inclusive)
  """
  if step <= 0:
    raise ValueError('step must be > 0')
  n = int(round((stop - start) / step))
  if n < 0:
    return []
  grid = np.round(start + step * np.arange(n + 1), 12)
  return [float(x) for x in grid]
