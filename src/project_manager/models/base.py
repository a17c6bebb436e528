from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time as a naive datetime.

    Project timestamps are TIMESTAMP WITHOUT TIME ZONE on PostgreSQL and
    ISO strings on SQLite; both store UTC by convention. Microsecond
    precision keeps consecutive updates ordered.
    """
    return datetime.now(UTC).replace(tzinfo=None)
