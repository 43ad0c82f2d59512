from typing import Optional


class CalculationError(ValueError):
    """Base class for rejected calculator input.

    ``field`` names the offending input field so the caller can point the
    user at it. ``code`` is the stable identifier sent to API clients.
    """

    field: Optional[str] = None

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if field is not None:
            self.field = field

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"code": self.code, "field": self.field, "message": self.message}


class InvalidAccountSize(CalculationError):
    field = "account_size"

    def __init__(self, message: str = "Account size must be > 0"):
        super().__init__(message)


class InvalidStopLoss(CalculationError):
    field = "stop_loss_points"

    def __init__(self, message: str = "Stop loss points must be > 0"):
        super().__init__(message)


class InvalidRiskPercentage(CalculationError):
    field = "risk_percentage"

    def __init__(self, message: str = "Risk percentage must be > 0 and <= 100"):
        super().__init__(message)


class InvalidRiskAmount(CalculationError):
    field = "risk_usd"

    def __init__(self, message: str = "Risk amount (USD) must be > 0"):
        super().__init__(message)


class InvalidPointValue(CalculationError):
    field = "custom_point_value"

    def __init__(self, message: str = "Custom point value must be > 0"):
        super().__init__(message)


class UnknownInstrument(CalculationError):
    field = "instrument"

    def __init__(self, symbol: str):
        super().__init__(f"Unsupported instrument: {symbol!r}")
        self.symbol = symbol


class DivisionByZero(CalculationError):
    def __init__(self, message: str = "Tick value resolved to zero; check the point value"):
        super().__init__(message)
