import os

from dotenv import load_dotenv

load_dotenv("./.env")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


DISABLE_JSON_LOGGING = _env_flag("DISABLE_JSON_LOGGING")
LOG_LEVEL = os.getenv("ASSISTANTS_RUNS_LOG_LEVEL", "INFO").upper()
