"""
Search configuration for bisection-based solvers.

SearchConfig is a serializable (JSON-friendly) record holding the purely
algorithmic settings of a root search: the bracket, the absolute tolerance
and the iteration budget. It carries no business assumptions.
"""

from collections.abc import Callable
from dataclasses import asdict
from dataclasses import dataclass
import json
from typing import Any


@dataclass(frozen=True)
class SearchConfig:
  """
  Configuration for a bounded bisection search.

  Attributes:
    low: Lower end of the search bracket
    high: Upper end of the search bracket
    tolerance: Absolute tolerance on the matched value
    max_iterations: Maximum number of midpoints to evaluate
    check_bracket: Record whether the target is bracketed by the values at
      low and high, and warn when it is not. Does not change the result.
  """
  low: float = 0.001
  high: float = 0.50
  tolerance: float = 1e-6
  max_iterations: int = 100
  check_bracket: bool = False

  @classmethod
  def default(cls) -> 'SearchConfig':
    """Bracket [0.1%, 50%], tolerance 1e-6, 100 iterations."""
    return cls()

  @classmethod
  def wide(cls) -> 'SearchConfig':
    """Wide bracket for deeply negative or very high rates."""
    return cls(low=-0.99, high=2.0, tolerance=1e-6, max_iterations=200)

  @classmethod
  def precise(cls) -> 'SearchConfig':
    """Default bracket with a tight tolerance and a larger budget."""
    return cls(tolerance=1e-10, max_iterations=500)

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'SearchConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'SearchConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))


SEARCH_PRESETS: dict[str, Callable[[], SearchConfig]] = {
    'default': SearchConfig.default,
    'wide': SearchConfig.wide,
    'precise': SearchConfig.precise,
}


def get_search_config(name: str) -> SearchConfig:
  """
  Create a search configuration from a preset name.

  Args:
    name: Preset name (see SEARCH_PRESETS)

  Returns:
    SearchConfig instance

  Raises:
    KeyError: If the preset name is unknown
  """
  try:
    factory = SEARCH_PRESETS[name]
  except KeyError as e:
    raise KeyError(f"Unknown search preset: '{name}'. "
                   f'Available: {list(SEARCH_PRESETS.keys())}') from e
  return factory()
