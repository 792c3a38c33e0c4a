#!filepath: tacore/config/cache_config.py
from typing import Optional

from pydantic import BaseModel, field_validator


class CacheConfig(BaseModel):
    # 超过该差值时改为迭代预填充
    recursion_threshold: int = 100
    # None = 不限制
    default_maximum_bar_count: Optional[int] = None

    @field_validator("recursion_threshold")
    @classmethod
    def _positive_threshold(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("recursion_threshold must be strictly positive")
        return v

    @field_validator("default_maximum_bar_count")
    @classmethod
    def _positive_bar_count(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("default_maximum_bar_count must be strictly positive")
        return v
