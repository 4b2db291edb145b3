'''
Signal decay models.

Exponential and power-law decay, half-life conversions, and time-weighted
scoring of signals that lose value with age. Every half-life, time scale and
age is an explicit argument; nothing here reads the clock.
'''

from math import log
from typing import Sequence

from finmath.domain.errors import InvalidDomainError
from finmath.domain.types import DecaySignal
from finmath.primitives.curves import exponential

LN2 = log(2.0)


def _require_positive(name: str, value: float) -> None:
  if value <= 0:
    raise InvalidDomainError(f'Invalid: {name} must be positive')


def exponential_decay(initial_value: float, half_life: float,
                      elapsed: float) -> float:
  '''
  Exponentially decayed value.

  Formula: V(t) = V0 * e^(-lambda*t), lambda = ln(2) / half_life

  Args:
    initial_value: Value at elapsed = 0
    half_life: Time for the value to halve
    elapsed: Time since the start, same unit as half_life

  Returns:
    Decayed value

  Raises:
    InvalidDomainError: If half_life <= 0
  '''
  _require_positive('half_life', half_life)
  lam = LN2 / half_life
  return exponential(elapsed, initial_value, -lam)


def power_decay(initial_value: float, time_scale: float, power: float,
                elapsed: float) -> float:
  '''
  Power-law decayed value.

  Formula: V(t) = V0 / (1 + t/t0)^p

  Raises:
    InvalidDomainError: If time_scale <= 0
  '''
  _require_positive('time_scale', time_scale)
  base = 1.0 + elapsed / time_scale
  if base < 0 and not float(power).is_integer():
    raise InvalidDomainError(
        'Invalid: elapsed before -time_scale with non-integer power')
  return initial_value / base**power


def half_life_from_lambda(lam: float) -> float:
  '''Half-life for a decay constant: ln(2) / lambda.'''
  _require_positive('lambda', lam)
  return LN2 / lam


def lambda_from_half_life(half_life: float) -> float:
  '''Decay constant for a half-life: ln(2) / half_life.'''
  _require_positive('half_life', half_life)
  return LN2 / half_life


def remaining_after_half_lives(half_lives: float) -> float:
  '''Fraction remaining after n half-lives: 0.5^n.'''
  return 0.5**half_lives


def adjusted_half_life(
    base_half_life: float,
    volatility: float = 1.0,
    conviction: float = 1.0,
) -> float:
  '''
  Half-life scaled by volatility and conviction.

  Higher volatility shortens the half-life, higher conviction lengthens it:
  base_half_life * conviction / volatility. The 1.0 defaults leave the base
  unchanged.

  Raises:
    InvalidDomainError: If any argument is <= 0
  '''
  _require_positive('base_half_life', base_half_life)
  if volatility <= 0 or conviction <= 0:
    raise InvalidDomainError(
        'Invalid: volatility and conviction must be positive')
  return (base_half_life * conviction) / volatility


def time_weighted_score(base_score: float, half_life: float,
                        age: float) -> float:
  '''Score decayed exponentially by its age.'''
  return exponential_decay(initial_value=base_score,
                           half_life=half_life,
                           elapsed=age)


def composite_decay_score(signals: Sequence[DecaySignal]) -> float:
  '''
  Mean of the decayed scores of several signals.

  Args:
    signals: Signals, each with its own score, half-life and age

  Returns:
    Plain average of the time-weighted scores, 0.0 for no signals
  '''
  if not signals:
    return 0.0

  total = 0.0
  for s in signals:
    total += time_weighted_score(s.score, s.half_life, s.age)
  return total / len(signals)


def greeks_adjusted_half_life(base_half_life: float,
                              theta_per_day: float) -> float:
  '''
  Half-life shortened by option time decay.

  Formula: base_half_life / (1 + |theta_per_day|). The sign of theta is
  ignored.
  '''
  _require_positive('base_half_life', base_half_life)
  return base_half_life / (1.0 + abs(theta_per_day))
