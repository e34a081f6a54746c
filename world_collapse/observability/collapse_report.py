#!filepath: world_collapse/observability/collapse_report.py
from __future__ import annotations

from typing import Dict, List, Tuple

from rich.table import Table

from world_collapse import logs
from world_collapse.observability.metrics import MetricRecorder


class CollapseReport:
    """
    单个 world 一次 pipeline 的报告：
      stage → 耗时 + 规则结果（MetricRecorder）

    timeline 里没有的 stage（被跳过的 step）只要记录过结果也会出现。
    """

    def __init__(self, label: str, timeline: Dict[str, float], metrics: MetricRecorder):
        self.label = label
        self.timeline = timeline
        self.metrics = metrics

    def rows(self) -> List[Tuple[str, float, str]]:
        stages = list(self.timeline)
        stages += [s for s in self.metrics.metrics if s not in self.timeline]
        return [
            (stage, self.timeline.get(stage, 0.0), self.metrics.outcome(stage))
            for stage in stages
        ]

    @property
    def total_seconds(self) -> float:
        return sum(self.timeline.values())

    def log(self):
        logs.debug(f"[Report] ===== {self.label} =====")
        for stage, sec, outcome in self.rows():
            logs.debug(f"[Report] {stage:<24} {sec:>8.6f}s  {outcome}")
        logs.debug(f"[Report] total{'':<19} {self.total_seconds:>8.6f}s")

    def to_table(self) -> Table:
        table = Table(title=f"{self.label} report")
        table.add_column("stage")
        table.add_column("ms", justify="right")
        table.add_column("outcome")

        for stage, sec, outcome in self.rows():
            table.add_row(stage, f"{sec * 1000:.3f}", outcome)
        return table
