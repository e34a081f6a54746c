#!filepath: world_collapse/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict

from world_collapse import logs


@dataclass
class MetricRecorder:
    """
    每个 stage 的规则结果（roll / tldr / government ...）

    metrics: {stage: {field: value}}，同一 stage 再次记录会合并字段
    """

    enabled: bool = True
    metrics: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def record(self, stage: str, **values: Any):
        if not self.enabled or not values:
            return
        self.metrics.setdefault(stage, {}).update(values)
        logs.debug(f"[Metric] {stage} {self.outcome(stage)}")

    def outcome(self, stage: str) -> str:
        """'roll=9 stage3_tl_dm=-3' style summary; '' if nothing recorded."""
        values = self.metrics.get(stage, {})
        return " ".join(f"{k}={v}" for k, v in values.items())

    def clear(self):
        self.metrics.clear()
