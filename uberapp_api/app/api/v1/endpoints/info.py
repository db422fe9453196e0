"""Service banner for API v1."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/", response_model=str)
def hello() -> str:
    return "Hello UberAPP!"
