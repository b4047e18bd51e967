from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UnassignedPolicy(str, Enum):
    SPLIT_EVENLY = "split_evenly"
    EXCLUDE = "exclude"
    REJECT = "reject"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SPLITBILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field("INFO")
    log_json: bool = Field(True)
    # How items nobody is assigned to are treated when computing subtotals.
    unassigned_items: UnassignedPolicy = Field(UnassignedPolicy.SPLIT_EVENLY)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def resolve_policy(policy: UnassignedPolicy | None) -> UnassignedPolicy:
    if policy is not None:
        return policy
    return get_settings().unassigned_items
