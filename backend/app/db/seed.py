"""Create the ``unicorns`` table and load it from the public CSV export.

Run with ``python -m backend.app.db.seed [path/to/unicorns.csv]``.
"""
import csv
import logging
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from dateutil import parser as dtparser
from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from ..core.config import settings
from ..core.logging_config import configure_logging
from .models import Unicorn
from .session import engine, init_db

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["Company", "Valuation ($B)", "Country", "City", "Industry", "Select Investors"]


def parse_date(value: Optional[str]) -> Optional[date]:
    # Export uses day/month/year
    if not value or not value.strip():
        logger.warning("Date string is empty")
        return None
    try:
        return dtparser.parse(value.strip(), dayfirst=True).date()
    except (ValueError, OverflowError):
        logger.warning("Could not parse date: %s", value)
        return None


def row_to_unicorn(row: dict) -> Optional[Unicorn]:
    if any(not (row.get(k) or "").strip() for k in REQUIRED_FIELDS):
        logger.warning("Skipping row with missing required fields: %s", row)
        return None
    try:
        valuation = Decimal(row["Valuation ($B)"].strip().lstrip("$")) * 1000
    except InvalidOperation:
        logger.warning("Skipping row with bad valuation: %s", row)
        return None
    return Unicorn(
        company=row["Company"].strip(),
        valuation=valuation,
        date_joined=parse_date(row.get("Date Joined")),
        country=row["Country"].strip(),
        city=row["City"].strip(),
        industry=row["Industry"].strip(),
        select_investors=row["Select Investors"].strip(),
    )


def seed(bind: Engine = engine, csv_path: Optional[str] = None) -> dict:
    init_db(bind)
    logger.info('Created "unicorns" table')

    path = csv_path or settings.UNICORNS_CSV
    inserted = 0
    with open(path, newline="", encoding="utf-8-sig") as fh, Session(bind) as session:
        seen = set(session.exec(select(Unicorn.company)).all())
        for row in csv.DictReader(fh):
            unicorn = row_to_unicorn(row)
            if unicorn is None or unicorn.company in seen:
                continue
            session.add(unicorn)
            seen.add(unicorn.company)
            inserted += 1
        session.commit()

    logger.info("Seeded %d unicorns", inserted)
    return {"rows_inserted": inserted}


if __name__ == "__main__":
    configure_logging()
    print(seed(csv_path=sys.argv[1] if len(sys.argv) > 1 else None))
