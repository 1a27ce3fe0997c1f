from dataclasses import dataclass
from typing import Literal

TABLE_NAME = "unicorns"


@dataclass(frozen=True)
class Column:
    name: str
    kind: Literal["text", "number", "date"]
    sql_type: str
    nullable: bool = False
    unique: bool = False

    def ddl(self) -> str:
        if self.name == "id":
            return "id SERIAL PRIMARY KEY"
        parts = [self.name, self.sql_type]
        if not self.nullable:
            parts.append("NOT NULL")
        if self.unique:
            parts.append("UNIQUE")
        return " ".join(parts)


COLUMNS: tuple[Column, ...] = (
    Column("id", "number", "SERIAL", unique=True),
    Column("company", "text", "VARCHAR(255)", unique=True),
    Column("valuation", "number", "DECIMAL(10, 2)"),
    Column("date_joined", "date", "DATE", nullable=True),
    Column("country", "text", "VARCHAR(255)"),
    Column("city", "text", "VARCHAR(255)"),
    Column("industry", "text", "VARCHAR(255)"),
    Column("select_investors", "text", "TEXT"),
)

# Prompt context; mirrors the table the seeder creates.
SCHEMA_DDL = TABLE_NAME + " (\n" + ",\n".join(f"  {c.ddl()}" for c in COLUMNS) + "\n)"
