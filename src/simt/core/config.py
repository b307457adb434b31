"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class LLMConfig(BaseSettings):
    """Generative text provider configuration."""

    model_config = {"env_prefix": "SIMT_LLM_"}

    provider: Literal["mock", "gemini"] = "mock"
    model: str = "gemini-2.5-flash"
    api_key: str = ""
    top_p: float = 0.95
    job_description_temperature: float = 0.5
    development_plan_temperature: float = 0.6
    talent_pool_temperature: float = 0.7
    employee_draft_temperature: float = 0.9


class RedisConfig(BaseSettings):
    """Redis store holding the employee and critical-job collections."""

    model_config = {"env_prefix": "SIMT_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class S3Config(BaseSettings):
    """S3 storage for exported reports."""

    model_config = {"env_prefix": "SIMT_S3_"}

    bucket: str = "simt-talent-reports"
    region: str = "ap-southeast-3"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SIMT_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    organisation: str = "Pemerintah Kabupaten Aceh Barat"

    llm: LLMConfig = LLMConfig()
    redis: RedisConfig = RedisConfig()
    s3: S3Config = S3Config()
