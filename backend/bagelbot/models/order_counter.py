"""Per-day order number counter."""

from datetime import date

from sqlmodel import Field, SQLModel


class DailyOrderCounter(SQLModel, table=True):
    """Last order number handed out for a business day.

    Incremented with a single UPDATE ... RETURNING (or an INSERT ... ON CONFLICT
    upsert for the first order of the day) so concurrent submissions never
    receive the same number.
    """

    __tablename__ = "daily_order_counters"

    day: date = Field(primary_key=True)
    last_value: int
