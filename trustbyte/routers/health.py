from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

@router.get("/ping", response_class=PlainTextResponse)
def ping():
    return "Pong"

@router.get("/healthz", response_class=PlainTextResponse)
def healthz():
    # Check the API is up
    return "ok"
