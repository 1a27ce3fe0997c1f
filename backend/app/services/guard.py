from dataclasses import dataclass
from typing import Literal

from .errors import GuardError
from .nl2sql import CandidateQuery

# Substring match on purpose: an identifier such as ``created_at`` is rejected too.
FORBIDDEN = (
    "drop", "delete", "insert", "update", "alter", "truncate", "create",
    "grant", "revoke", "execute", "merge", "lock", "comment", "explain",
)


@dataclass(frozen=True)
class ValidatedQuery:
    sql: str
    source: Literal["generated", "fallback"]


def normalize(sql: str) -> str:
    return sql.strip().rstrip(";").strip().lower()


def validate(candidate: CandidateQuery) -> ValidatedQuery:
    checked = normalize(candidate.sql)
    if not checked.startswith("select"):
        raise GuardError("Only SELECT queries are allowed")
    hits = [k for k in FORBIDDEN if k in checked]
    if hits:
        raise GuardError(f"Query contains a forbidden operation: {hits[0]}")
    if ";" in checked:
        raise GuardError("Only a single statement is allowed")
    return ValidatedQuery(sql=candidate.sql, source=candidate.source)
