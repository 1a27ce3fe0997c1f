from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

Scalar = str | int | float | None
ResultRow = dict[str, Scalar]


class QueryExplanation(BaseModel):
    section: str = Field(description="A unique substring of the SQL query")
    explanation: str = Field(default="", description="Plain-language explanation of the section, may be empty")


class QueryExplanations(BaseModel):
    explanations: list[QueryExplanation]


class ChartConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["bar", "line", "area", "pie", "scatter"] = Field(description="Type of chart")
    x_key: str = Field(alias="xKey", description="Column used for the x-axis or categories")
    y_keys: list[str] = Field(alias="yKeys", min_length=1, description="Columns plotted as series")
    colors: dict[str, str] = Field(default_factory=dict, description="Color token per y key")
    legend: bool = Field(default=True, description="Whether to show a legend")


# HTTP payloads

class NLQuery(BaseModel):
    question: str


class GeneratedSQL(BaseModel):
    sql: str
    source: Literal["generated", "fallback"]


class SQLRun(BaseModel):
    sql: str


class RunResult(BaseModel):
    rows: list[ResultRow]
    csv: Optional[str] = None


class ExplainRequest(BaseModel):
    question: str
    sql: str


class ChartRequest(BaseModel):
    rows: list[dict[str, Any]]
    question: str


class ChartResult(BaseModel):
    config: ChartConfig


class NLResult(BaseModel):
    sql: str
    source: Literal["generated", "fallback"]
    rows: list[ResultRow]
    csv: Optional[str] = None
    config: ChartConfig
