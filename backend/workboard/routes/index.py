"""GET / : static welcome text."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Index"])

WELCOME_MESSAGE = "Welcome to the Employee and Task Management System"


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
async def index() -> str:
    return WELCOME_MESSAGE
