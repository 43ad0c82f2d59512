from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from calculator.instruments import DEFAULT_INSTRUMENT


class RiskMode(str, Enum):
    PERCENTAGE = "percentage"
    FIXED_USD = "usd"


class CalculationInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Numbers stay optional here; missing / non-positive values are rejected
    # by calculator.service so each one maps to its own error code.
    account_size: Optional[float] = None
    risk_mode: RiskMode = RiskMode.PERCENTAGE
    risk_percentage: Optional[float] = None
    risk_usd: Optional[float] = None
    instrument: str = DEFAULT_INSTRUMENT
    stop_loss_points: Optional[float] = None
    custom_point_value: Optional[float] = None

    @field_validator(
        "account_size",
        "risk_percentage",
        "risk_usd",
        "stop_loss_points",
        "custom_point_value",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        # An untouched form field arrives as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    instrument: str
    risk_amount_usd: float
    risk_percentage_of_account: float
    stop_loss_points: float
    point_value_used: float
    tick_value_usd: float
    position_size_lots: float


class PositionSizeResponse(BaseModel):
    instrument: str
    risk_amount_usd: float
    risk_percentage_of_account: float
    stop_loss_points: float
    point_value_used: float
    tick_value_usd: float
    position_size_lots: float

    @classmethod
    def from_result(cls, result: CalculationResult) -> "PositionSizeResponse":
        return cls(
            instrument=result.instrument,
            risk_amount_usd=round(result.risk_amount_usd, 2),
            risk_percentage_of_account=round(result.risk_percentage_of_account, 2),
            stop_loss_points=result.stop_loss_points,
            point_value_used=result.point_value_used,
            tick_value_usd=round(result.tick_value_usd, 2),
            position_size_lots=round(result.position_size_lots, 3),
        )


class InstrumentOut(BaseModel):
    symbol: str
    name: str
    default_point_value: float
    category: str
