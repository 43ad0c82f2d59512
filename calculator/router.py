import logging
from typing import List

from fastapi import APIRouter, HTTPException

from calculator.errors import CalculationError
from calculator.models import (
    CalculationInput,
    InstrumentOut,
    PositionSizeResponse,
)
from calculator.service import calculate, list_instruments

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Calculator"])


@router.get("/instruments", response_model=List[InstrumentOut])
def instruments_api():
    return [
        InstrumentOut(
            symbol=spec.symbol,
            name=spec.display_name,
            default_point_value=spec.default_point_value,
            category=spec.category,
        )
        for spec in list_instruments()
    ]


@router.post("/position-size", response_model=PositionSizeResponse)
def position_size_api(data: CalculationInput):
    try:
        result = calculate(data)
    except CalculationError as e:
        logger.info("rejected position size request: %s (%s)", e.code, e.field)
        raise HTTPException(status_code=400, detail=e.to_dict())

    return PositionSizeResponse.from_result(result)
