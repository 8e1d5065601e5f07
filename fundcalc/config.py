"""App-wide configuration read from the environment (and a local ``.env``)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv

from fundcalc.core.coercion import coerce_int, coerce_number
from fundcalc.models import ADULTHOOD_AGE

DEFAULT_RATE_PERCENT = 7.0
DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    log_level: str = "INFO"
    default_rate_percent: float = DEFAULT_RATE_PERCENT
    adulthood_age: int = ADULTHOOD_AGE

    @classmethod
    def from_env(cls, env: Optional[dict] = None) -> "Settings":
        if env is None:
            load_dotenv()
            env = dict(os.environ)

        raw_origins = env.get("FUNDCALC_CORS_ORIGINS", "")
        origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

        raw_rate = env.get("FUNDCALC_DEFAULT_RATE")
        rate = coerce_number(raw_rate) if raw_rate is not None else DEFAULT_RATE_PERCENT

        adulthood = coerce_int(env.get("FUNDCALC_ADULTHOOD_AGE", ADULTHOOD_AGE))
        if adulthood <= 0:
            adulthood = ADULTHOOD_AGE

        return cls(
            cors_origins=origins or DEFAULT_CORS_ORIGINS,
            log_level=env.get("FUNDCALC_LOG_LEVEL", "INFO").upper(),
            default_rate_percent=rate,
            adulthood_age=adulthood,
        )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
