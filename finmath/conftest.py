import pytest

from finmath.domain.types import ValuationInputs


@pytest.fixture
def reference_inputs() -> ValuationInputs:
  """Calibrated reverse DCF scenario with known spreadsheet values."""
  return ValuationInputs(
      enterprise_value=1000.0,
      base_value=500.0,
      margin=0.15,
      tax_rate=0.25,
      capital_efficiency=0.5,
      discount_rate=0.10,
      stable_growth=0.03,
      horizon=10,
      trial_growth=0.08,
  )


@pytest.fixture
def flat_inputs() -> ValuationInputs:
  """Zero growth over 3 periods, so FCF equals NOPAT every period."""
  return ValuationInputs(
      enterprise_value=0.0,
      base_value=100.0,
      margin=0.20,
      tax_rate=0.25,
      capital_efficiency=0.5,
      discount_rate=0.10,
      stable_growth=0.0,
      horizon=3,
      trial_growth=0.0,
  )
