# survey_backend/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel


class Settings(BaseModel):
    data_dir: str = "./data"
    allowed_origins: List[str] = ["*"]
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Read settings from the environment once per process.
      - RESPONSES_DATA_DIR: where <type>_responses.json files live
      - CORS_ALLOWED_ORIGINS: comma-separated list
      - LOG_LEVEL: INFO, DEBUG, ...
    """
    origins = os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
    return Settings(
        data_dir=os.getenv("RESPONSES_DATA_DIR", "./data"),
        allowed_origins=[o.strip() for o in origins if o.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
