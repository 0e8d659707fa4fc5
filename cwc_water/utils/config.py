"""Configuration loader for the water data service."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class MongoConfig(BaseModel):
    uri: Optional[str] = None
    database: str = "cwc"
    source_tag: str = "seed-water-v1"
    server_selection_timeout_ms: int = 10000


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 4000
    reload: bool = True
    cors_origins: list[str] = ["*"]


class SeedConfig(BaseModel):
    days_of_history: int = 10


class DashboardConfig(BaseModel):
    sample_size: int = 20
    total_stations: int = 1248


class ClientConfig(BaseModel):
    base_url: str = "http://localhost:4000/api/water"
    timeout_seconds: float = 15.0


class LoggingConfig(BaseModel):
    level: str = "INFO"
    # relative paths resolve against the project root
    directory: str = "logs"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    rotation: str = "10 MB"
    retention: str = "7 days"


class AppConfig(BaseModel):
    name: str = "cwc_water"
    version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    logging: LoggingConfig = LoggingConfig()
    mongo: MongoConfig = MongoConfig()
    api: APIConfig = APIConfig()
    seed: SeedConfig = SeedConfig()
    dashboard: DashboardConfig = DashboardConfig()
    client: ClientConfig = ClientConfig()


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_yaml_config(env: str = "development") -> dict[str, Any]:
    config_path = get_project_root() / "config" / "environments" / f"{env}.yaml"
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(env: Optional[str] = None) -> Settings:
    env = env or os.getenv("APP_ENV", "development")
    yaml_config = load_yaml_config(env)

    # Override with env vars
    if os.getenv("MONGODB_URI"):
        yaml_config.setdefault("mongo", {})["uri"] = os.getenv("MONGODB_URI")
    if os.getenv("MONGODB_DB"):
        yaml_config.setdefault("mongo", {})["database"] = os.getenv("MONGODB_DB")
    if os.getenv("SEED_SOURCE_TAG"):
        yaml_config.setdefault("mongo", {})["source_tag"] = os.getenv("SEED_SOURCE_TAG")
    if os.getenv("API_PORT"):
        yaml_config.setdefault("api", {})["port"] = os.getenv("API_PORT")
    if os.getenv("WATER_API_BASE"):
        yaml_config.setdefault("client", {})["base_url"] = os.getenv("WATER_API_BASE")
    if os.getenv("LOG_LEVEL"):
        yaml_config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")
    if os.getenv("LOG_DIR"):
        yaml_config.setdefault("logging", {})["directory"] = os.getenv("LOG_DIR")

    return Settings(**yaml_config) if yaml_config else Settings()


settings = get_settings()
