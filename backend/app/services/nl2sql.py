import logging
import re
from dataclasses import dataclass
from typing import Literal

from .errors import GenerationError, LLMError, LLMQuotaError
from .provider import LLMClient
from .schema_registry import SCHEMA_DDL, TABLE_NAME

logger = logging.getLogger(__name__)

SQL_SYSTEM = (
    "You are a SQL (postgres) expert. Generate a SQL query to answer the user's question "
    "about unicorn companies.\n"
    f"The table schema is:\n{SCHEMA_DDL}\n"
    "Rules:\n"
    "- Return exactly one SELECT statement.\n"
    "- Return ONLY the SQL, no commentary, no code fences.\n"
    "- SELECT-only; never modify data.\n"
)

FENCE = re.compile(r"^```(?:sql)?\s*\n?|\n?```$", re.IGNORECASE)
WORD = re.compile(r"[a-z0-9_']+")


@dataclass(frozen=True)
class CandidateQuery:
    sql: str
    source: Literal["generated", "fallback"] = "generated"


def fallback_sql(question: str) -> str:
    """Keyword rules used when the model is out of quota."""
    words = WORD.findall(question.lower())
    text = f" {' '.join(words)} "

    if "count" in words or " how many " in text:
        if "industry" in words:
            return f"SELECT industry, COUNT(*) as count FROM {TABLE_NAME} GROUP BY industry ORDER BY count DESC"
        if "country" in words:
            return f"SELECT country, COUNT(*) as count FROM {TABLE_NAME} GROUP BY country ORDER BY count DESC"
        return f"SELECT 'total' as metric, COUNT(*) as count FROM {TABLE_NAME}"

    if "valuation" in words or "worth" in words:
        if "highest" in words or "top" in words:
            return f"SELECT company, valuation FROM {TABLE_NAME} ORDER BY valuation DESC LIMIT 10"
        if "average" in words or "avg" in words:
            return f"SELECT 'average' as metric, AVG(valuation) as value FROM {TABLE_NAME}"
        return f"SELECT company, valuation FROM {TABLE_NAME} ORDER BY valuation DESC"

    return f"SELECT company, valuation FROM {TABLE_NAME} LIMIT 50"


def build_sql_from_question(llm: LLMClient, question: str) -> CandidateQuery:
    try:
        raw = llm.complete(SQL_SYSTEM, f"Generate a SQL query for: {question}")
    except LLMQuotaError as e:
        logger.warning("LLM quota exceeded, falling back to keyword query generation: %s", e)
        return CandidateQuery(fallback_sql(question), source="fallback")
    except LLMError as e:
        logger.error("Query generation failed: %s", e)
        raise GenerationError(f"Failed to generate query: {e}") from e
    # unwrap code fences if any slipped through
    return CandidateQuery(FENCE.sub("", raw.strip()).strip(), source="generated")
