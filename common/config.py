"""
설정 파일 로드

config/ 디렉토리의 모듈별 YAML 파일을 읽어 하나의 dict로 합칩니다.
MAINTD_CONFIG_DIR 환경변수로 디렉토리를 바꿀 수 있습니다.
"""

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "MAINTD_CONFIG_DIR"
DEFAULT_CONFIG_DIR = Path(__file__).parent.parent / "config"
CONFIG_FILES = ("dispatcher.yaml", "store.yaml", "admin.yaml", "logging.yaml")


class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_format: bool = True
    log_file: str | None = None


class AdminConfig(BaseModel):
    """Admin API 설정"""
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


def resolve_config_dir(config_dir: str | Path | None = None) -> Path:
    """설정 디렉토리 결정 (인자 > 환경변수 > 기본값)"""
    if config_dir is not None:
        return Path(config_dir)
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return DEFAULT_CONFIG_DIR


def load_config(config_dir: str | Path | None = None) -> dict:
    """
    설정 파일 로드

    존재하지 않는 파일은 건너뛰고, 각 파일의 최상위 키를 합칩니다.

    Raises:
        ValueError: YAML 최상위가 매핑이 아닌 경우
        yaml.YAMLError: YAML 문법 오류
    """
    config_path = resolve_config_dir(config_dir)
    config: dict = {}

    for file_name in CONFIG_FILES:
        file_path = config_path / file_name
        if not file_path.exists():
            logger.debug(f"Config file not found, skipping: {file_path}")
            continue

        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {file_path}")
        config.update(data)

    return config
