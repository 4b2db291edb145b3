"""Error types shared by every finmath module."""


class InvalidDomainError(ValueError):
  """
  Raised when inputs describe a mathematically undefined configuration.

  Examples are a perpetuity growth rate at or above the discount rate, a
  non-positive half-life, or a negative base raised to a fractional power.
  Raised before any computation runs, so callers never see partial results.
  """
