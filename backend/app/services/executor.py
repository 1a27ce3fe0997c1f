import logging
import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, inspect, select, table
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..schemas.query import ResultRow, RunResult
from .errors import DatabaseError, NoMatchingRows, TableEmpty, TableMissing
from .guard import ValidatedQuery
from .schema_registry import TABLE_NAME

logger = logging.getLogger(__name__)

# postgres: relation "unicorns" does not exist / sqlite: no such table: unicorns
MISSING_RELATION = re.compile(r'relation\s+"?[\w.]+"?\s+does not exist|no such table', re.IGNORECASE)


def to_scalar(value):
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (date, datetime, time)):
        return value.isoformat()
    if value is None or isinstance(value, (str, int, float)):
        return value
    # arrays, json, uuid, interval, bytes
    return str(value)


def to_csv(rows: list[ResultRow]) -> str:
    # No header and no quoting; values containing commas are not escaped.
    return "\n".join(
        ",".join("" if v is None else str(v) for v in row.values()) for row in rows
    )


def wants_csv(sql: str) -> bool:
    lowered = sql.lower()
    return "csv" in lowered or "export" in lowered


def run_readonly_sql(engine: Engine, query: ValidatedQuery) -> list[ResultRow]:
    try:
        with engine.connect() as conn:
            if not inspect(conn).has_table(TABLE_NAME):
                raise TableMissing(f'Table "{TABLE_NAME}" does not exist')

            count = conn.execute(select(func.count()).select_from(table(TABLE_NAME))).scalar_one()
            if count == 0:
                raise TableEmpty(f'Table "{TABLE_NAME}" has no rows')

            # no_parameters: the driver must not treat "%" or ":name" as placeholders
            res = conn.exec_driver_sql(query.sql, execution_options={"no_parameters": True})
            cols = list(res.keys())
            rows = [{c: to_scalar(v) for c, v in zip(cols, row)} for row in res.fetchall()]
    except SQLAlchemyError as e:
        message = str(getattr(e, "orig", None) or e)
        if MISSING_RELATION.search(message):
            logger.error("Query hit a missing table: %s", message)
            raise TableMissing(f"Table does not exist: {message}") from e
        logger.error("Query failed: %s", message)
        raise DatabaseError(message) from e

    if not rows:
        raise NoMatchingRows("The query ran but no rows matched")
    return rows


def execute(engine: Engine, query: ValidatedQuery) -> RunResult:
    rows = run_readonly_sql(engine, query)
    csv: Optional[str] = to_csv(rows) if wants_csv(query.sql) else None
    return RunResult(rows=rows, csv=csv)
