# world_collapse/config/rules_config.py
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class DiceConfig(BaseModel):
    """
    seed=None → 每次运行使用系统熵
    """
    seed: Optional[int] = None


class CodecConfig(BaseModel):
    # False = 兼容旧行为：未知符号 decode 为 0（会打 warning）
    strict_decode: bool = True


class HardTimesConfig(BaseModel):
    """
    Hard Times 规则配置

    degrees_of_change:
      attrition roll 阈值 → 星港降级数
      例如 {8: 1, 11: 2}：roll >= 8 降 1 级，roll >= 11 降 2 级
      None = 规则表未转录（Stage 2 直通或报错）
    """
    strict_unspecified: bool = False
    degrees_of_change: Optional[Dict[int, int]] = None

    @field_validator("degrees_of_change")
    @classmethod
    def _non_negative_degrees(cls, v):
        if v is None:
            return v
        for threshold, degrees in v.items():
            if degrees < 0:
                raise ValueError(
                    f"degrees_of_change[{threshold}] must be >= 0, got {degrees}"
                )
        return v


class VirusConfig(BaseModel):
    # law level 是否 clamp 到 0-18（转录规则本身不 clamp）
    clamp_law: bool = False
    law_min: int = Field(default=0, ge=0)
    law_max: int = Field(default=18, le=34)
