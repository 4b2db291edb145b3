'''
Domain types for the finmath engine.

These frozen dataclasses are the inputs and outputs of the valuation and
root-finding engine. They hold plain floats only and live for a single call.
Business parameters (rates, margins, horizons, half-lives) have no defaults;
only the algorithmic search settings in SearchConfig do.
'''

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from finmath.search.config import SearchConfig


@dataclass(frozen=True)
class ValuationInputs:
  '''
  Inputs for one reverse-DCF evaluation at a trial growth rate.

  Attributes:
    enterprise_value: Target or observed enterprise value. Informational for
      the forward calculation; implied_growth_rate searches against it.
    base_value: Base-period value the projection grows from (e.g. sales)
    margin: Operating margin as a fraction
    tax_rate: Tax rate as a fraction
    capital_efficiency: Reinvestment per unit of base-value growth
    discount_rate: Discount rate (cost of capital) per period
    stable_growth: Perpetual growth rate after the horizon
    horizon: Number of explicit forecast periods
    trial_growth: Compound growth rate of the base value to test
  '''
  enterprise_value: float
  base_value: float
  margin: float
  tax_rate: float
  capital_efficiency: float
  discount_rate: float
  stable_growth: float
  horizon: int
  trial_growth: float

  def with_trial_growth(self, trial_growth: float) -> 'ValuationInputs':
    '''Copy of these inputs with a different trial growth rate.'''
    return replace(self, trial_growth=trial_growth)

  def with_discount_rate(self, discount_rate: float) -> 'ValuationInputs':
    '''Copy of these inputs with a different discount rate.'''
    return replace(self, discount_rate=discount_rate)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary.'''
    return asdict(self)


@dataclass(frozen=True)
class PeriodCashFlow:
  '''
  Projected figures for one forecast period.

  Attributes:
    period: 1-based period index
    base_value: Projected base value at this period
    nopat: Net operating profit after tax
    reinvestment: Capital reinvested (negative when the base shrinks)
    free_cash_flow: nopat - reinvestment
    pv_free_cash_flow: free_cash_flow discounted back `period` periods
  '''
  period: int
  base_value: float
  nopat: float
  reinvestment: float
  free_cash_flow: float
  pv_free_cash_flow: float


@dataclass(frozen=True)
class ValuationResult:
  '''
  Output of a reverse-DCF evaluation.

  Attributes:
    pv_explicit: Sum of present values over the explicit forecast
    terminal_fcf: Free cash flow in the final forecast period
    terminal_value: Gordon growth terminal value (undiscounted)
    pv_terminal_value: Terminal value discounted back `horizon` periods
    implied_value: pv_explicit + pv_terminal_value
    periods: Per-period projection, ordered 1..horizon
  '''
  pv_explicit: float
  terminal_fcf: float
  terminal_value: float
  pv_terminal_value: float
  implied_value: float
  periods: Tuple[PeriodCashFlow, ...] = ()

  def to_dict(self) -> Dict[str, Any]:
    '''Convert headline figures to a dictionary (periods excluded).'''
    return {
        'pv_explicit': self.pv_explicit,
        'terminal_fcf': self.terminal_fcf,
        'terminal_value': self.terminal_value,
        'pv_terminal_value': self.pv_terminal_value,
        'implied_value': self.implied_value,
    }


@dataclass(frozen=True)
class RootSearchInputs:
  '''
  Inputs for an implied discount rate search.

  Attributes:
    cash_flows: Cash flows for periods 1..N (may be empty)
    target: Present value to match
    config: Bracket, tolerance and iteration budget
  '''
  cash_flows: Tuple[float, ...]
  target: float
  config: SearchConfig = field(default_factory=SearchConfig)

  @classmethod
  def from_sequence(
      cls,
      cash_flows: Sequence[float],
      target: float,
      config: Optional[SearchConfig] = None,
  ) -> 'RootSearchInputs':
    '''Build from any sequence of cash flows.'''
    return cls(
        cash_flows=tuple(float(cf) for cf in cash_flows),
        target=float(target),
        config=config if config is not None else SearchConfig(),
    )


@dataclass(frozen=True)
class RootSearchResult:
  '''
  Outcome of a bisection search.

  Attributes:
    rate: Rate that meets the tolerance, or None when the iteration budget
      ran out. Never the last midpoint of a failed search.
    iterations: Number of midpoints evaluated
    diag: Diagnostic information about the search
  '''
  rate: Optional[float]
  iterations: int
  diag: Dict[str, Any] = field(default_factory=dict)

  @property
  def converged(self) -> bool:
    '''Whether a rate was found.'''
    return self.rate is not None


@dataclass(frozen=True)
class DecaySignal:
  '''
  A scored signal for composite decay scoring.

  Attributes:
    score: Score when the signal was fresh
    half_life: Half-life, in the same unit as age
    age: Elapsed time since the signal was produced
  '''
  score: float
  half_life: float
  age: float
