from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env

DEFAULT_CONFIG_PATH = "api_config.json"
DEFAULT_OUTPUT_PATH = "data.parquet"
DEFAULT_LOG_DIR = "logs"


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def config_path() -> str:
    """Config file location, overridable with CONSUMPTION_CONFIG_PATH."""
    return env_get("CONSUMPTION_CONFIG_PATH", DEFAULT_CONFIG_PATH)


def output_path() -> str:
    """Parquet output location, overridable with CONSUMPTION_OUTPUT_PATH."""
    return env_get("CONSUMPTION_OUTPUT_PATH", DEFAULT_OUTPUT_PATH)
