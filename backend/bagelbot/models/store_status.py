"""Store open/closed singleton model."""

from sqlmodel import Field, SQLModel

STORE_STATUS_ID = 1


class StoreStatus(SQLModel, table=True):
    """Singleton row (id is always 1) holding the store's open/closed flag."""

    __tablename__ = "store_status"

    id: int = Field(default=STORE_STATUS_ID, primary_key=True)
    store_closed: bool = Field(default=False)
    notes: str = Field(default="")
