#!filepath: world_collapse/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .rules_config import CodecConfig, DiceConfig, HardTimesConfig, VirusConfig


def package_root() -> str:
    """
    返回包目录（基于当前文件位置推导）:
    world_collapse/config/app_config.py → world_collapse/config → world_collapse
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    dice: DiceConfig = Field(default_factory=DiceConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
    hard_times: HardTimesConfig = Field(default_factory=HardTimesConfig)
    virus: VirusConfig = Field(default_factory=VirusConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 world_collapse/config/base.yml
        - 不依赖当前工作目录
        - WORLD_COLLAPSE_SEED 覆盖 dice.seed
        """
        load_dotenv()

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        seed = os.getenv("WORLD_COLLAPSE_SEED")
        if seed is not None and seed.strip():
            try:
                seed_value = int(seed)
            except ValueError:
                raise ValueError(
                    f"WORLD_COLLAPSE_SEED must be an integer, got {seed!r}"
                ) from None
            raw.setdefault("dice", {})
            raw["dice"]["seed"] = seed_value

        return cls(**raw)
