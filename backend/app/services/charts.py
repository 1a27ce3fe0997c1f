import json
import logging
from typing import Any

from ..schemas.query import ChartConfig
from .errors import ChartConfigError, LLMError, LLMQuotaError
from .provider import LLMClient

logger = logging.getLogger(__name__)

SYSTEM = "You are a data visualization expert."

EXAMPLE_CONFIG = """{
  "type": "pie",
  "xKey": "month",
  "yKeys": ["sales", "profit", "expenses"],
  "colors": {"sales": "#4CAF50", "profit": "#2196F3", "expenses": "#F44336"},
  "legend": true
}"""


def chart_color(index: int) -> str:
    """Color token for the index-th series; resolved by the front end's theme."""
    return f"hsl(var(--chart-{index + 1}))"


def with_colors(config: ChartConfig) -> ChartConfig:
    colors = {key: chart_color(i) for i, key in enumerate(config.y_keys)}
    return config.model_copy(update={"colors": colors})


def default_chart() -> ChartConfig:
    return with_colors(ChartConfig(type="bar", x_key="company", y_keys=["valuation"], legend=True))


def fallback_chart(rows: list[dict[str, Any]]) -> ChartConfig:
    if not rows:
        return default_chart()
    columns = list(rows[0].keys())
    y_keys = columns[1:] or columns[:1]
    return with_colors(ChartConfig(type="bar", x_key=columns[0], y_keys=y_keys, legend=True))


def check_keys(config: ChartConfig, rows: list[dict[str, Any]]) -> None:
    for key in [config.x_key, *config.y_keys]:
        if any(key not in row for row in rows):
            raise ChartConfigError(f"Chart key {key!r} is not a column of the result")


def generate_chart_config(llm: LLMClient, rows: list[dict[str, Any]], question: str) -> ChartConfig:
    prompt = (
        "Given the following data from a SQL query result, generate the chart config that best "
        "visualises the data and answers the users query.\n"
        "For multiple groups use multi-lines.\n\n"
        f"Here is an example complete config:\n{EXAMPLE_CONFIG}\n\n"
        f"User Query:\n{question}\n\n"
        f"Data:\n{json.dumps(rows, indent=2, default=str)}"
    )
    try:
        config = llm.complete_structured(SYSTEM, prompt, ChartConfig)
    except LLMQuotaError as e:
        logger.warning("LLM quota exceeded, using fallback chart configuration: %s", e)
        return fallback_chart(rows)
    except LLMError as e:
        logger.error("Chart suggestion failed: %s", e)
        raise ChartConfigError(f"Failed to generate chart suggestion: {e}") from e

    check_keys(config, rows)
    return with_colors(config)
