import dataclasses

import pytest

from finmath.domain.errors import InvalidDomainError
from finmath.domain.types import RootSearchInputs
from finmath.domain.types import RootSearchResult
from finmath.engine.dcf import reverse_dcf
from finmath.search.config import SearchConfig


class TestValuationInputs:
  """Tests for ValuationInputs."""

  def test_with_trial_growth(self, reference_inputs):
    """Copy differs only in trial growth."""
    other = reference_inputs.with_trial_growth(0.12)

    assert other.trial_growth == 0.12
    assert reference_inputs.trial_growth == 0.08
    assert dataclasses.replace(other, trial_growth=0.08) == reference_inputs

  def test_with_discount_rate(self, reference_inputs):
    other = reference_inputs.with_discount_rate(0.09)

    assert other.discount_rate == 0.09
    assert reference_inputs.discount_rate == 0.10

  def test_frozen(self, reference_inputs):
    with pytest.raises(dataclasses.FrozenInstanceError):
      reference_inputs.margin = 0.5

  def test_to_dict(self, reference_inputs):
    data = reference_inputs.to_dict()

    assert data['base_value'] == 500.0
    assert data['horizon'] == 10
    assert len(data) == 9


class TestValuationResult:
  """Tests for ValuationResult."""

  def test_to_dict_excludes_periods(self, reference_inputs):
    result = reverse_dcf(reference_inputs)

    data = result.to_dict()

    assert 'periods' not in data
    assert data['implied_value'] == result.implied_value
    assert len(result.periods) == reference_inputs.horizon


class TestRootSearchInputs:
  """Tests for RootSearchInputs."""

  def test_from_sequence(self):
    """Lists become float tuples with the default config."""
    inputs = RootSearchInputs.from_sequence([1, 2, 3], 5)

    assert inputs.cash_flows == (1.0, 2.0, 3.0)
    assert inputs.target == 5.0
    assert inputs.config == SearchConfig()

  def test_custom_config(self):
    config = SearchConfig.wide()

    inputs = RootSearchInputs.from_sequence([], 0.0, config)

    assert inputs.config is config
    assert inputs.cash_flows == ()


class TestRootSearchResult:
  """Tests for RootSearchResult."""

  def test_converged(self):
    assert RootSearchResult(rate=0.1, iterations=5).converged
    assert RootSearchResult(rate=0.0, iterations=1).converged

  def test_not_converged(self):
    result = RootSearchResult(rate=None, iterations=100)

    assert not result.converged
    assert result.diag == {}


class TestInvalidDomainError:
  """Tests for InvalidDomainError."""

  def test_is_value_error(self):
    """Callers catching ValueError also catch domain errors."""
    assert issubclass(InvalidDomainError, ValueError)
