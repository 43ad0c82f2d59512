from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Query

from guidelines.service import greeting_for_hour, guidelines_payload, time_greeting

router = APIRouter(prefix="/api", tags=["Guidelines"])


@router.get("/guidelines")
def get_guidelines():
    return guidelines_payload()


@router.get("/greeting")
def get_greeting(hour: Optional[int] = Query(None, ge=0, le=23)):
    # Browser clients pass their local hour; server time otherwise
    if hour is None:
        return {"greeting": time_greeting(datetime.now())}
    return {"greeting": f"{greeting_for_hour(hour)}, Trader"}
