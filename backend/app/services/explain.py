import logging

from ..schemas.query import QueryExplanation, QueryExplanations
from .errors import ExplanationError, LLMError
from .provider import LLMClient
from .schema_registry import SCHEMA_DDL

logger = logging.getLogger(__name__)

SYSTEM = (
    "You are a SQL (postgres) expert. Your job is to explain to the user the SQL query you wrote "
    "to retrieve the data they asked for. The table schema is as follows:\n"
    f"{SCHEMA_DDL}\n\n"
    "When you explain you must take a section of the query, and then explain it. Each \"section\" "
    "should be unique. So in a query like: \"SELECT * FROM unicorns limit 20\", the sections could be "
    "\"SELECT *\", \"FROM UNICORNS\", \"LIMIT 20\".\n"
    "If a section doesn't have any explanation, include it, but leave the explanation empty."
)


def explain_query(llm: LLMClient, question: str, sql: str) -> list[QueryExplanation]:
    prompt = (
        "Explain the SQL query you generated to retrieve the data the user wanted. "
        "Assume the user is not an expert in SQL. Break down the query into steps. Be concise.\n\n"
        f"User Query:\n{question}\n\n"
        f"Generated SQL Query:\n{sql}"
    )
    try:
        result = llm.complete_structured(SYSTEM, prompt, QueryExplanations)
    except LLMError as e:
        logger.error("Explanation failed: %s", e)
        raise ExplanationError(f"Failed to explain query: {e}") from e
    return result.explanations
