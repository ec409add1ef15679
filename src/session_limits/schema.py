"""Table layout for persisted session limits."""

DEFAULT_TABLE = "limite_session"
ID_COLUMN = "id"
LIMIT_COLUMN = "limite"


def create_table_sql(table: str = DEFAULT_TABLE) -> str:
    """Return the DDL that creates the session limit table."""
    return (
        f"create table if not exists public.{table} (\n"
        f"    {ID_COLUMN} bigint generated by default as identity primary key,\n"
        f"    {LIMIT_COLUMN} integer not null\n"
        ");\n"
    )
