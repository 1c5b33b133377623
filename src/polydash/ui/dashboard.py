"""
Dashboard HTML Generator

Turns the view state into display-ready values and renders the
single-page dashboard.
"""

import html
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..analysis.normalize import (
    compute_bar_width,
    compute_histogram_heights,
    compute_probability_width,
    compute_scale_max,
    format_percent,
    normalize_magnitude,
)
from ..config import Config
from ..models import MarketMetrics
from ..utils.logging import get_logger
from .view import DashboardState

logger = get_logger(__name__)

EMPTY_LABEL = "--"
EMPTY_BAR_WIDTH = "22%"

METRICS_DOCUMENTATION = [
    ("Liquidity", "Indicates how easily you can enter/exit positions."),
    ("Volume", "Shows recent trading activity and market interest."),
    ("Implied Probability", "The market's consensus on the event outcome."),
    ("Spread", "The difference between buy and sell prices, reflecting market efficiency."),
    ("Time to Resolution", "How soon the market will resolve."),
    ("Historical Price Trends", "Past price movements for context."),
    ("Trade Signals", "Automated or manual indicators suggesting buy/sell/hold actions."),
    ("Kelly Fraction", "Optimal bet size based on edge and odds, for maximizing long-term growth."),
    ("Volatility", "Measures price fluctuations and risk in the market."),
    ("Degen Risk", "Subjective risk score for highly speculative or volatile markets."),
]

DISCLAIMER = (
    "This dashboard is for informational purposes only and does not constitute "
    "financial advice. You are solely responsible for any decisions and outcomes "
    "based on the information provided."
)


@dataclass
class DashboardDisplay:
    """Display-ready values for every widget on the page"""
    liquidity_label: str = EMPTY_LABEL
    volume_label: str = EMPTY_LABEL
    probability_label: str = EMPTY_LABEL
    spread_label: str = EMPTY_LABEL
    time_to_resolution_label: str = EMPTY_LABEL
    trade_signal: str = "Pending"
    degen_risk: str = EMPTY_LABEL
    liquidity_width: str = EMPTY_BAR_WIDTH
    volume_width: str = EMPTY_BAR_WIDTH
    probability_width: str = EMPTY_BAR_WIDTH
    histogram_heights: List[str] = field(
        default_factory=lambda: [format_percent(h) for h in compute_histogram_heights(None)]
    )


def build_display(metrics: Optional[MarketMetrics]) -> DashboardDisplay:
    """
    Compute widget values for a metrics record.

    Liquidity and volume share one scale so their bars are comparable.
    Without metrics every widget shows its placeholder.
    """
    if metrics is None:
        return DashboardDisplay()

    liquidity = normalize_magnitude(metrics.liquidity)
    volume = normalize_magnitude(metrics.volume)
    strength_max = compute_scale_max(liquidity, volume)

    return DashboardDisplay(
        liquidity_label=str(metrics.liquidity),
        volume_label=str(metrics.volume),
        probability_label=f"{metrics.implied_probability * 100:.2f}%",
        spread_label=str(metrics.spread),
        time_to_resolution_label=metrics.time_to_resolution,
        trade_signal="Active",
        degen_risk="Medium",
        liquidity_width=format_percent(compute_bar_width(liquidity, strength_max)),
        volume_width=format_percent(compute_bar_width(volume, strength_max)),
        probability_width=format_percent(compute_probability_width(metrics.implied_probability)),
        histogram_heights=[format_percent(h) for h in compute_histogram_heights(metrics.historical_prices)],
    )


def _bar_row(label: str, value: str, width: str) -> str:
    return f"""
            <div class="bar-row">
              <div class="bar-head"><span>{html.escape(label)}</span><span>{html.escape(value)}</span></div>
              <div class="bar-track"><div class="bar-fill" style="width: {width}"></div></div>
            </div>"""


def _tile(label: str, value: str) -> str:
    return f"""
            <div class="tile">
              <div class="tile-label">{html.escape(label)}</div>
              <div class="tile-value">{html.escape(value)}</div>
            </div>"""


def generate_html_dashboard(state: DashboardState, form_action: str = "/") -> str:
    """Render the full dashboard page for a view state"""
    display = build_display(state.metrics)

    history_bars = "".join(
        f'<div class="history-bar" style="height: {height}"></div>'
        for height in display.histogram_heights
    )
    strength_rows = "".join([
        _bar_row("Liquidity", display.liquidity_label, display.liquidity_width),
        _bar_row("Volume", display.volume_label, display.volume_width),
        _bar_row("Implied Probability", display.probability_label, display.probability_width),
    ])
    tiles = "".join([
        _tile("Spread", display.spread_label),
        _tile("Time to Resolution", display.time_to_resolution_label),
        _tile("Trade Signal", display.trade_signal),
        _tile("Degen Risk", display.degen_risk),
    ])
    docs = "".join(
        f"<li>{html.escape(name)}: {html.escape(text)}</li>"
        for name, text in METRICS_DOCUMENTATION
    )

    input_disabled = " disabled" if state.loading else ""
    button_disabled = "" if state.can_submit else " disabled"
    button_label = "Analyzing..." if state.loading else "Analyze"
    error_html = f'<div class="error">{html.escape(state.error)}</div>' if state.error else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Polymarket Dashboard</title>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif; background: #f4f4f5; color: #18181b; margin: 0; padding: 24px; }}
    main {{ max-width: 1100px; margin: 0 auto; display: flex; flex-direction: column; gap: 24px; }}
    section, header, footer {{ background: #fff; border: 1px solid #e4e4e7; border-radius: 12px; padding: 16px 24px; }}
    form {{ display: flex; gap: 8px; }}
    input[type=url] {{ flex: 1; padding: 10px; border: 1px solid #d4d4d8; border-radius: 8px; }}
    button {{ padding: 10px 16px; border: 0; border-radius: 8px; background: #18181b; color: #fff; font-weight: 600; }}
    button:disabled {{ opacity: 0.6; }}
    .error {{ color: #ef4444; font-size: 14px; margin-top: 8px; }}
    .grid {{ display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }}
    .card-title {{ font-size: 12px; text-transform: uppercase; letter-spacing: 0.05em; color: #71717a; margin-bottom: 12px; }}
    .history {{ height: 176px; display: flex; align-items: flex-end; gap: 4px; background: #fafafa; border: 1px solid #e4e4e7; border-radius: 8px; padding: 12px; }}
    .history-bar {{ flex: 1; background: #d4d4d8; border-radius: 4px 4px 0 0; }}
    .bar-row {{ margin-bottom: 12px; }}
    .bar-head {{ display: flex; justify-content: space-between; font-size: 12px; color: #71717a; margin-bottom: 4px; }}
    .bar-track {{ height: 8px; background: #e4e4e7; border-radius: 999px; }}
    .bar-fill {{ height: 8px; background: #18181b; border-radius: 999px; }}
    .tiles {{ grid-column: span 2; display: grid; grid-template-columns: repeat(4, 1fr); gap: 16px; }}
    .tile {{ background: #fafafa; border: 1px solid #e4e4e7; border-radius: 8px; padding: 12px; text-align: center; }}
    .tile-label {{ font-size: 11px; text-transform: uppercase; color: #71717a; }}
    .tile-value {{ font-size: 18px; font-weight: 600; margin-top: 4px; }}
    footer {{ font-size: 12px; color: #71717a; }}
  </style>
</head>
<body>
<main>
  <header>
    <h1>Polymarket Dashboard</h1>
    <p>Analyze Polymarket markets and visualize key metrics to help inform your decisions.</p>
  </header>

  <section>
    <label for="market-url">Polymarket URL</label>
    <form method="post" action="{html.escape(form_action)}">
      <input id="market-url" name="url" type="url" placeholder="https://polymarket.com/market/..." value="{html.escape(state.url)}"{input_disabled}>
      <button type="submit"{button_disabled}>{button_label}</button>
    </form>
    {error_html}
  </section>

  <section>
    <h2>Market Visualizations</h2>
    <div class="grid">
      <div>
        <div class="card-title">Historical Price Trend</div>
        <div class="history">{history_bars}</div>
      </div>
      <div>
        <div class="card-title">Market Strength Mix</div>{strength_rows}
      </div>
      <div class="tiles">{tiles}
      </div>
    </div>
  </section>

  <section>
    <h2>Metrics Documentation</h2>
    <ul>{docs}</ul>
  </section>

  <footer><strong>Disclaimer:</strong> {html.escape(DISCLAIMER)}</footer>
</main>
</body>
</html>
"""


def write_html_dashboard(state: DashboardState, output_path: Path = None) -> Path:
    """
    Render the dashboard and write it to disk.

    Args:
        state: View state to render
        output_path: Destination file (defaults to Config.DASHBOARD_OUTPUT)

    Returns:
        Path to the written file
    """
    output_path = Path(output_path or Config.DASHBOARD_OUTPUT)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(generate_html_dashboard(state))

    logger.info(f"Dashboard saved to {output_path}")
    return output_path
