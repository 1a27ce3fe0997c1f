from datetime import date
from decimal import Decimal
from typing import Optional
from sqlmodel import SQLModel, Field

class Unicorn(SQLModel, table=True):
    __tablename__ = "unicorns"

    id: Optional[int] = Field(default=None, primary_key=True)
    company: str = Field(max_length=255, unique=True, nullable=False)
    valuation: Decimal = Field(max_digits=10, decimal_places=2, nullable=False)
    date_joined: Optional[date] = None
    country: str = Field(max_length=255, nullable=False)
    city: str = Field(max_length=255, nullable=False)
    industry: str = Field(max_length=255, nullable=False)
    select_investors: str = Field(nullable=False)
