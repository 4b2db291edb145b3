import math

import pytest

from finmath.domain.errors import InvalidDomainError
from finmath.domain.types import DecaySignal
from finmath.primitives.decay import adjusted_half_life
from finmath.primitives.decay import composite_decay_score
from finmath.primitives.decay import exponential_decay
from finmath.primitives.decay import greeks_adjusted_half_life
from finmath.primitives.decay import half_life_from_lambda
from finmath.primitives.decay import lambda_from_half_life
from finmath.primitives.decay import power_decay
from finmath.primitives.decay import remaining_after_half_lives
from finmath.primitives.decay import time_weighted_score


class TestExponentialDecay:
  """Tests for exponential_decay function."""

  def test_one_half_life(self):
    """Half remains after one half-life."""
    assert exponential_decay(100.0, 10.0, 10.0) == pytest.approx(50.0)

  def test_two_half_lives(self):
    """Quarter remains after two half-lives."""
    assert exponential_decay(100.0, 10.0, 20.0) == pytest.approx(25.0)

  def test_no_elapsed_time(self):
    """Nothing decays at t = 0."""
    assert exponential_decay(100.0, 10.0, 0.0) == 100.0

  def test_negative_elapsed_overflow(self):
    """Far negative elapsed time grows past the float range."""
    assert exponential_decay(100.0, 1.0, -5000.0) == math.inf

  def test_non_positive_half_life(self):
    """Half-life must be positive."""
    with pytest.raises(InvalidDomainError, match='half_life must be positive'):
      exponential_decay(100.0, 0.0, 10.0)
    with pytest.raises(InvalidDomainError):
      exponential_decay(100.0, -5.0, 10.0)


class TestPowerDecay:
  """Tests for power_decay function."""

  def test_known_value(self):
    """100 / (1 + 10/10)^2 = 25"""
    assert power_decay(100.0, 10.0, 2.0, 10.0) == pytest.approx(25.0)

  def test_no_elapsed_time(self):
    """Nothing decays at t = 0."""
    assert power_decay(100.0, 10.0, 2.0, 0.0) == 100.0

  def test_slower_tail_than_exponential(self):
    """Power law keeps more value far out than exponential decay."""
    assert power_decay(100.0, 10.0, 1.0, 100.0) > exponential_decay(
        100.0, 10.0, 100.0)

  def test_non_positive_time_scale(self):
    """Time scale must be positive."""
    with pytest.raises(InvalidDomainError, match='time_scale must be positive'):
      power_decay(100.0, 0.0, 2.0, 10.0)


class TestHalfLifeConversions:
  """Tests for half_life_from_lambda and lambda_from_half_life."""

  def test_lambda_from_half_life(self):
    """ln(2) / 10"""
    assert lambda_from_half_life(10.0) == pytest.approx(math.log(2) / 10)

  def test_half_life_from_lambda(self):
    """ln(2) / 0.1 = 6.931"""
    assert half_life_from_lambda(0.1) == pytest.approx(6.931, abs=0.001)

  def test_round_trip(self):
    """Conversions are inverses of each other."""
    assert half_life_from_lambda(lambda_from_half_life(7.5)) == pytest.approx(
        7.5)

  def test_non_positive_inputs(self):
    """Both conversions reject non-positive inputs."""
    with pytest.raises(InvalidDomainError, match='lambda must be positive'):
      half_life_from_lambda(0.0)
    with pytest.raises(InvalidDomainError, match='half_life must be positive'):
      lambda_from_half_life(-1.0)


class TestRemainingAfterHalfLives:
  """Tests for remaining_after_half_lives function."""

  @pytest.mark.parametrize('half_lives, expected', [
      (0, 1.0),
      (1, 0.5),
      (2, 0.25),
      (3, 0.125),
  ])
  def test_fractions(self, half_lives, expected):
    """0.5^n"""
    assert remaining_after_half_lives(half_lives) == expected


class TestAdjustedHalfLife:
  """Tests for adjusted_half_life function."""

  def test_defaults_leave_base_unchanged(self):
    """Neutral volatility and conviction."""
    assert adjusted_half_life(10.0) == 10.0

  def test_volatility_shortens(self):
    """Double volatility halves the half-life."""
    assert adjusted_half_life(10.0, volatility=2.0) == 5.0

  def test_conviction_lengthens(self):
    """Double conviction doubles the half-life."""
    assert adjusted_half_life(10.0, conviction=2.0) == 20.0

  def test_non_positive_factors(self):
    """Volatility and conviction must be positive."""
    with pytest.raises(InvalidDomainError,
                       match='volatility and conviction must be positive'):
      adjusted_half_life(10.0, volatility=0.0)
    with pytest.raises(InvalidDomainError):
      adjusted_half_life(10.0, conviction=-1.0)

  def test_non_positive_base(self):
    """Base half-life must be positive."""
    with pytest.raises(InvalidDomainError,
                       match='base_half_life must be positive'):
      adjusted_half_life(0.0)


class TestCompositeDecayScore:
  """Tests for time_weighted_score and composite_decay_score."""

  def test_time_weighted_score(self):
    """Score of 80 one half-life old is 40."""
    assert time_weighted_score(80.0, 5.0, 5.0) == pytest.approx(40.0)

  def test_average_of_decayed_scores(self):
    """Three signals aged 0, 1 and 2 half-lives.

    Manual calculation:
    (100 + 50 + 25) / 3 = 58.333
    """
    signals = [
        DecaySignal(score=100.0, half_life=10.0, age=0.0),
        DecaySignal(score=100.0, half_life=10.0, age=10.0),
        DecaySignal(score=100.0, half_life=10.0, age=20.0),
    ]

    assert composite_decay_score(signals) == pytest.approx(58.333, abs=0.001)

  def test_empty(self):
    """No signals scores zero."""
    assert composite_decay_score([]) == 0.0


class TestGreeksAdjustedHalfLife:
  """Tests for greeks_adjusted_half_life function."""

  def test_theta_shortens(self):
    """10 / (1 + 0.5) = 6.667"""
    assert greeks_adjusted_half_life(10.0, -0.5) == pytest.approx(6.667,
                                                                  abs=0.001)

  def test_sign_ignored(self):
    """Positive and negative theta adjust alike."""
    assert greeks_adjusted_half_life(10.0,
                                     0.3) == greeks_adjusted_half_life(
                                         10.0, -0.3)

  def test_zero_theta(self):
    """No theta leaves the half-life unchanged."""
    assert greeks_adjusted_half_life(10.0, 0.0) == 10.0
