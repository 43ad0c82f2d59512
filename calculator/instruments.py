from dataclasses import dataclass
from typing import Dict, List

from calculator.errors import UnknownInstrument


@dataclass(frozen=True)
class InstrumentSpec:
    symbol: str
    display_name: str
    default_point_value: float
    category: str


# Point value = USD per 1 point move for 1 lot. Brokers differ, hence the
# custom override on the calculator input.
_SPECS = [
    InstrumentSpec("XAUUSD", "Gold", 100.0, "Precious Metals"),
    InstrumentSpec("US30", "Dow Jones", 1.0, "Indices"),
    InstrumentSpec("US100", "NASDAQ", 1.0, "Indices"),
    InstrumentSpec("SPX500", "S&P 500", 1.0, "Indices"),
    InstrumentSpec("BTCUSD", "Bitcoin", 1.0, "Crypto"),
]

INSTRUMENT_SPECS: Dict[str, InstrumentSpec] = {spec.symbol: spec for spec in _SPECS}

DEFAULT_INSTRUMENT = "XAUUSD"


def normalize_symbol(symbol: str) -> str:
    return (symbol or "").strip().upper()


def get_instrument(symbol: str) -> InstrumentSpec:
    spec = INSTRUMENT_SPECS.get(normalize_symbol(symbol))
    if spec is None:
        raise UnknownInstrument(symbol)
    return spec


def all_instruments() -> List[InstrumentSpec]:
    return list(INSTRUMENT_SPECS.values())
