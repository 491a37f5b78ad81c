import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    dictionary_path: str = os.getenv("BREATHALYZER_DICTIONARY_PATH", "twl06.txt")
    scorer_workers: int = int(os.getenv("BREATHALYZER_SCORER_WORKERS", "1"))
    log_level: str = os.getenv("BREATHALYZER_LOG_LEVEL", "INFO").upper()


settings = Settings()
