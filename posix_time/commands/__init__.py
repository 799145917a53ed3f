"""Commands - convert, table."""
