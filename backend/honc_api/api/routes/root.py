"""Root Banner — plain-text greeting at GET /."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["root"])

BANNER = "Honc from above! ☁️🪿"


@router.get(
    "/", response_class=PlainTextResponse,
    responses={200: {"description": "Root fetched successfully"}},
)
async def root():
    return BANNER
