"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Output
    output_format: str = "card"
    color: bool = True

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    # Snowflake generation (bwmarrin layout, Twitter epoch)
    snowflake_node_id: int = 1
    snowflake_epoch_ms: int = 1288834974657

    # Deterministic / sample generation inputs
    typeid_prefix: str = "demo"
    uuid_namespace_name: str = "idinfo-generated"
    sqids_sample_numbers: list[int] = [42, 123, 7890]

    model_config = {"env_file": ".env", "env_prefix": "IDINFO_"}
