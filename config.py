"""
Constants and configuration for SpendTrend.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


# empty means memory-only storage
REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
TRANSACTIONS_TTL: int = int(os.getenv("TRANSACTIONS_TTL", "0"))

KEY_PREFIX = "st"
TRANSACTION_ID_PREFIX = "txn_"
HEALTH_MESSAGE = "API is healthy"
API_PREFIX = "/api/v1"

# an OLS line needs two distinct indices
FORECAST_MIN_POINTS = 2


class Settings(BaseSettings):
    redis_url: str = REDIS_URL
    host: str = os.getenv("SPENDTREND_HOST", "0.0.0.0")
    port: int = int(os.getenv("SPENDTREND_PORT", "4330"))
    log_level: str = os.getenv("SPENDTREND_LOG_LEVEL", "INFO")

    # forecast reporting
    # |slope| at or below this reads as a flat trend in reports
    forecast_flat_slope_tolerance: float = 1e-9
    forecast_money_precision: int = 2

    # transaction storage
    transactions_max_per_user: int = 10_000
    transactions_ttl: int = TRANSACTIONS_TTL

    store_redis_retry_cooldown_seconds: float = 10.0
    store_op_timeout_seconds: float = 0.5
    store_fallback_max_items: int = 10_000

    model_config = {
        "env_prefix": "SPENDTREND_",
        "extra": "ignore",
    }


settings = Settings()
