"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from simt.core.config import AppSettings, LLMConfig, RedisConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.llm.provider == "mock"
    assert settings.organisation == "Pemerintah Kabupaten Aceh Barat"


def test_llm_config_defaults():
    config = LLMConfig()
    assert config.provider == "mock"
    assert config.model == "gemini-2.5-flash"
    assert config.job_description_temperature == 0.5
    assert config.talent_pool_temperature == 0.7


def test_redis_config_env_override(monkeypatch):
    monkeypatch.setenv("SIMT_REDIS_HOST", "redis.internal")
    monkeypatch.setenv("SIMT_REDIS_PORT", "6380")
    config = RedisConfig()
    assert config.host == "redis.internal"
    assert config.port == 6380
