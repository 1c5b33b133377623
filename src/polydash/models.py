"""
Market metrics record

The shape exchanged between the metrics endpoint and the dashboard view.
Payloads are validated here, at the edge, so the display layer only ever
sees well-typed fields.
"""

from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Union

from .analysis.normalize import finite_float, parse_number
from .exceptions import MetricsPayloadError

Magnitude = Union[float, int, str]


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _coerce_magnitude(value: Any) -> Magnitude:
    # Text and float-sized numbers pass through; the display normalizes them
    if isinstance(value, str):
        return value
    if _is_number(value) and finite_float(value) is not None:
        return value
    return 0


def _coerce_float(value: Any) -> Optional[float]:
    if _is_number(value):
        return finite_float(value)
    if isinstance(value, str):
        return parse_number(value)
    return None


def _coerce_prices(value: Any) -> Optional[List[float]]:
    if not isinstance(value, (list, tuple)):
        return None
    prices = []
    for point in value:
        parsed = _coerce_float(point)
        if parsed is not None:
            prices.append(parsed)
    return prices


@dataclass
class MarketMetrics:
    """Metrics for a single market, as returned by the metrics endpoint"""
    liquidity: Magnitude
    volume: Magnitude
    implied_probability: float
    spread: Magnitude
    time_to_resolution: str
    historical_prices: Optional[List[float]] = field(default=None)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MarketMetrics":
        """
        Build a record from a wire payload (camelCase keys).

        Fields that don't conform are defaulted rather than trusted:
        magnitudes fall back to 0, the probability to 0.0, the label to ""
        and a non-list price history to None.

        Raises:
            MetricsPayloadError: payload is not a mapping
        """
        if not isinstance(payload, Mapping):
            raise MetricsPayloadError(
                f"Expected metrics object, got {type(payload).__name__}"
            )

        probability = _coerce_float(payload.get("impliedProbability"))
        label = payload.get("timeToResolution")
        if label is None:
            label = ""
        elif not isinstance(label, str):
            label = str(label)

        return cls(
            liquidity=_coerce_magnitude(payload.get("liquidity")),
            volume=_coerce_magnitude(payload.get("volume")),
            implied_probability=probability if probability is not None else 0.0,
            spread=_coerce_magnitude(payload.get("spread")),
            time_to_resolution=label,
            historical_prices=_coerce_prices(payload.get("historicalPrices")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire format"""
        return {
            "liquidity": self.liquidity,
            "volume": self.volume,
            "impliedProbability": self.implied_probability,
            "spread": self.spread,
            "timeToResolution": self.time_to_resolution,
            "historicalPrices": list(self.historical_prices) if self.historical_prices is not None else None,
        }
