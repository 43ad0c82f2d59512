import logging
import math
from typing import List, Optional

from calculator.errors import (
    DivisionByZero,
    InvalidAccountSize,
    InvalidPointValue,
    InvalidRiskAmount,
    InvalidRiskPercentage,
    InvalidStopLoss,
)
from calculator.instruments import (
    InstrumentSpec,
    all_instruments,
    get_instrument,
    normalize_symbol,
)
from calculator.models import CalculationInput, CalculationResult, RiskMode

logger = logging.getLogger(__name__)


def _positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def list_instruments() -> List[InstrumentSpec]:
    return all_instruments()


def validate_input(data: CalculationInput) -> None:
    if not _positive(data.account_size):
        raise InvalidAccountSize()

    if not _positive(data.stop_loss_points):
        raise InvalidStopLoss()

    if data.risk_mode == RiskMode.PERCENTAGE:
        if not _positive(data.risk_percentage) or data.risk_percentage > 100:
            raise InvalidRiskPercentage()
    elif not _positive(data.risk_usd):
        raise InvalidRiskAmount()

    if data.custom_point_value is not None and not _positive(data.custom_point_value):
        raise InvalidPointValue()


def resolve_point_value(data: CalculationInput) -> float:
    if data.custom_point_value is not None:
        return data.custom_point_value
    return get_instrument(data.instrument).default_point_value


def resolve_risk_amount(data: CalculationInput) -> float:
    if data.risk_mode == RiskMode.PERCENTAGE:
        return data.account_size * (data.risk_percentage / 100)
    return data.risk_usd


def calculate(data: CalculationInput) -> CalculationResult:
    """Maximum position size (lots) that loses ``risk_amount`` at the stop.

    Raises a ``CalculationError`` subclass on invalid input. Results are
    full precision; rounding for display is the caller's job.
    """
    validate_input(data)

    point_value = resolve_point_value(data)
    risk_amount = resolve_risk_amount(data)

    tick_value = data.stop_loss_points * point_value
    if tick_value == 0:
        raise DivisionByZero()

    position_size = risk_amount / tick_value
    risk_pct = (risk_amount / data.account_size) * 100
    # extreme magnitudes overflow to inf even with a non-zero tick value
    if not all(math.isfinite(v) for v in (risk_amount, tick_value, position_size, risk_pct)):
        raise DivisionByZero("Result out of range; check the input magnitudes")

    result = CalculationResult(
        instrument=normalize_symbol(data.instrument),
        risk_amount_usd=risk_amount,
        risk_percentage_of_account=risk_pct,
        stop_loss_points=data.stop_loss_points,
        point_value_used=point_value,
        tick_value_usd=tick_value,
        position_size_lots=position_size,
    )
    logger.debug(
        "position size %s: risk=%.2f tick=%.2f lots=%.6f",
        result.instrument,
        risk_amount,
        tick_value,
        position_size,
    )
    return result
