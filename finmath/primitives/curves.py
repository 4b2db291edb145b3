"""
Curve primitives for scoring and confidence shaping.

Pure, closed-form curve shapes: logistic (and its inverse), exponential,
power law, tanh, linear interpolation and smoothstep.
"""

from math import exp
from math import inf
from math import log
from math import tanh
from typing import Optional

from finmath.domain.errors import InvalidDomainError


def logistic(t: float, L: float, k: float, t0: float) -> float:  # pylint: disable=invalid-name
  """
  Logistic (sigmoid) curve.

  Formula: f(t) = L / (1 + e^(-k*(t - t0)))

  Equals L/2 at t0 for any k. Positive k increases towards L, negative k
  decreases towards 0.

  Args:
    t: Input value
    L: Upper asymptote
    k: Steepness (sign sets direction)
    t0: Midpoint

  Returns:
    Curve value at t
  """
  x = k * (t - t0)
  if x >= 0:
    return L / (1.0 + exp(-x))
  # Same value, arranged so exp() cannot overflow for large negative x.
  ex = exp(x)
  return L * ex / (1.0 + ex)


def logistic_normalized(t: float, k: float, t0: float) -> float:
  """Logistic curve with L = 1, in [0, 1]."""
  return logistic(t, 1.0, k, t0)


def inverse_logistic(y: float, L: float, k: float, t0: float) -> Optional[float]:  # pylint: disable=invalid-name
  """
  Recover t from a logistic output y.

  Formula: t = t0 - (1/k) * ln(L/y - 1)

  Args:
    y: Logistic output, must lie strictly inside (0, L)
    L: Upper asymptote
    k: Steepness
    t0: Midpoint

  Returns:
    Input t, or None when y is outside (0, L)

  Raises:
    InvalidDomainError: If k == 0 (flat curve has no inverse)
  """
  if y <= 0 or y >= L:
    return None
  if k == 0:
    raise InvalidDomainError('Invalid: steepness k must be non-zero')
  return t0 - (1.0 / k) * log((L / y) - 1.0)


def exponential(t: float, A: float, r: float) -> float:  # pylint: disable=invalid-name
  """Exponential curve A * e^(r*t); r < 0 decays. +/-inf on overflow."""
  try:
    return A * exp(r * t)
  except OverflowError:
    return A * inf


def power_law(t: float, A: float, p: float) -> float:  # pylint: disable=invalid-name
  """
  Power law curve A * t^p.

  Raises:
    InvalidDomainError: If t < 0 with a non-integer exponent, or t == 0 with
      a negative exponent
  """
  if t < 0 and not float(p).is_integer():
    raise InvalidDomainError('Invalid: negative t with non-integer power')
  if t == 0 and p < 0:
    raise InvalidDomainError('Invalid: zero t with negative power')
  return A * t**p


def tanh_normalized(t: float, k: float, t0: float) -> float:
  """Hyperbolic tangent mapped to [0, 1]: (tanh(k*(t - t0)) + 1) / 2."""
  return (tanh(k * (t - t0)) + 1.0) / 2.0


def linear_interpolation(
    t: float,
    t0: float,
    t1: float,
    y0: float,
    y1: float,
) -> float:
  """
  Linear interpolation between (t0, y0) and (t1, y1).

  t is clamped to the segment, so the result never leaves [y0, y1].
  Returns y0 when t0 == t1.
  """
  if t1 == t0:
    return y0

  t_clamped = max(min(t0, t1), min(max(t0, t1), t))
  return y0 + (y1 - y0) * (t_clamped - t0) / (t1 - t0)


def smoothstep(t: float, edge0: float, edge1: float) -> float:
  """
  Smoothstep: 3x^2 - 2x^3 with x = (t - edge0) / (edge1 - edge0) in [0, 1].

  Zero slope at both edges. Returns 0.0 when edge0 == edge1.
  """
  if edge1 == edge0:
    return 0.0

  x = max(0.0, min(1.0, (t - edge0) / (edge1 - edge0)))
  return x * x * (3.0 - 2.0 * x)
