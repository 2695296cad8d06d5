"""Service banner endpoint."""

from fastapi import APIRouter

router = APIRouter()

RUNNING_MESSAGE = "BagelBot backend is running"


@router.get("/", operation_id="root")
async def root() -> dict[str, str]:
    """Report that the backend is up."""
    return {"status": RUNNING_MESSAGE}
