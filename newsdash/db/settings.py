"""Settings management in database."""

from psycopg import Connection

from ..models import SettingsRecord

SETTINGS_ID = 1
DEFAULT_RETENTION_DAYS = 7
MIN_RETENTION_DAYS = 1
MAX_RETENTION_DAYS = 365


def validate_retention_days(value) -> int:
    """Coerce and range-check a retention window."""
    if isinstance(value, bool):
        raise ValueError("Retention days must be a number")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError("Retention days is required")
        try:
            value = float(value)
        except ValueError:
            raise ValueError("Retention days must be a number")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("Retention days must be a whole number")
        value = int(value)
    if not isinstance(value, int):
        raise ValueError("Retention days must be a number")
    if value < MIN_RETENTION_DAYS:
        raise ValueError(f"Retention days must be at least {MIN_RETENTION_DAYS}")
    if value > MAX_RETENTION_DAYS:
        raise ValueError(f"Retention days must be at most {MAX_RETENTION_DAYS}")
    return value


class SettingsManager:
    """Read and update the single settings row."""

    def __init__(self, default_retention_days: int = DEFAULT_RETENTION_DAYS) -> None:
        self.default_retention_days = default_retention_days

    def get_settings(self, conn: Connection) -> SettingsRecord:
        """Get settings, falling back to defaults when the row is missing."""
        with conn.cursor() as cur:
            cur.execute("SELECT * FROM settings WHERE id = %s", (SETTINGS_ID,))
            row = cur.fetchone()

        if row is None:
            return SettingsRecord(
                id=SETTINGS_ID,
                article_retention_days=self.default_retention_days,
            )
        return SettingsRecord(**row)

    def update_settings(self, conn: Connection, article_retention_days) -> SettingsRecord:
        """Validate and store the retention window."""
        days = validate_retention_days(article_retention_days)

        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO settings (id, article_retention_days)
                VALUES (%s, %s)
                ON CONFLICT (id) DO UPDATE SET
                    article_retention_days = EXCLUDED.article_retention_days
                RETURNING *
                """,
                (SETTINGS_ID, days),
            )
            row = cur.fetchone()

        conn.commit()
        return SettingsRecord(**row)
