from copy import deepcopy
from datetime import datetime
from typing import Optional

from guidelines.content import ABOUT, GUIDELINES, RECOMMENDED_RISK_HINT, REMINDER


def greeting_for_hour(hour: int) -> str:
    if not 0 <= hour <= 23:
        raise ValueError("Hour must be between 0 and 23")

    if 5 <= hour < 12:
        return "Good morning"
    if 12 <= hour < 17:
        return "Good afternoon"
    return "Good evening"


def time_greeting(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"{greeting_for_hour(now.hour)}, Trader"


def guidelines_payload() -> dict:
    return {
        "sections": deepcopy(GUIDELINES),
        "reminder": REMINDER,
        "risk_hint": RECOMMENDED_RISK_HINT,
        "about": deepcopy(ABOUT),
    }
