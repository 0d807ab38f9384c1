"""Global configuration for mockrender.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class MockRenderConfig(BaseSettings):
    """mockrender configuration settings.

    Values can be overridden via environment variables with MOCKRENDER_ prefix.
    Example: MOCKRENDER_FRAMEWORK_MODULE=MyMocks overrides framework_module.
    """

    # Generated code naming
    framework_module: str = Field(
        default="Mockingbird",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Module that qualifies runtime framework symbols",
    )
    initializer_proxy_name: str = Field(
        default="initialize",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Method name of generated initializer proxies",
    )
    generic_mock_type_name: str = Field(
        default="__ReturnType",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Synthetic generic parameter bound to the caller's mock type",
    )
    static_mock_name: str = Field(
        default="staticMock",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Proxy object shared by static and class members",
    )
    extra_reserved_names: dict[str, str] = Field(
        default_factory=dict,
        description="Additional operator -> accessor alias mappings for matching",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level used by the command line",
    )

    model_config = {
        "env_prefix": "MOCKRENDER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> MockRenderConfig:
    """Get cached configuration instance.

    Returns:
        MockRenderConfig singleton instance.
    """
    return MockRenderConfig()


def reload_config() -> MockRenderConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh MockRenderConfig instance.
    """
    get_config.cache_clear()
    return get_config()
