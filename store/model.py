"""저장소 설정 모델"""
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class StoreConfig(BaseModel):
    """Key-Value 저장소 설정"""
    type: Literal["sqlite", "memory"] = "sqlite"
    path: str | None = Field(default="data/kv.db", description="sqlite 저장소 파일 경로")
    values: dict[str, str] = Field(default_factory=dict, description="memory 저장소 초기값")

    @model_validator(mode="after")
    def _check_path(self) -> "StoreConfig":
        if self.type == "sqlite" and not self.path:
            raise ValueError("store.path is required for sqlite store")
        return self
