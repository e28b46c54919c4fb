"""Index Route — fixed placeholder landing page at `/`."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["index"])

INDEX_PLACEHOLDER = "Index Handler Placeholder"


@router.get("/", response_class=PlainTextResponse)
async def index():
    return INDEX_PLACEHOLDER
