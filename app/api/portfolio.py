from __future__ import annotations

from fastapi import APIRouter

from app.schemas.portfolio import Portfolio
from app.services.portfolio import get_portfolio

router = APIRouter(prefix="/api")


@router.get("/portfolio", response_model=Portfolio)
def portfolio() -> Portfolio:
    return get_portfolio()
