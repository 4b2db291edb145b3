"""
Closed-form primitives: time value of money, curves and decay.

Import the modules by name; several functions share parameter names with
functions in other modules (present_value, future_value).

Example:
  from finmath.primitives import time_value
  pv = time_value.present_value(future_value=1000.0, rate=0.10, periods=5)
"""

from finmath.primitives import curves
from finmath.primitives import decay
from finmath.primitives import time_value

__all__ = [
    'curves',
    'decay',
    'time_value',
]
