import os
from dataclasses import dataclass, field
from typing import List

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    app_title: str = "Trading Risk Calculator"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            app_title=os.getenv("RISK_CALC_APP_TITLE", "Trading Risk Calculator"),
            log_level=os.getenv("RISK_CALC_LOG_LEVEL", "INFO"),
            cors_origins=_split_origins(os.getenv("RISK_CALC_CORS_ORIGINS", "*")),
        )
