#!filepath: world_collapse/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Optional

from world_collapse.observability.collapse_report import CollapseReport
from world_collapse.observability.metrics import MetricRecorder


@dataclass
class Instrumentation:
    """
    Instrumentation（Leaf-only accounting + Parent scope）。

    规则：
    1. Timeline 只记录叶子节点（record=True），即 step 的 stage 名
    2. Step 级 timer 仅作为时间语义边界（record=False）
    3. 规则结果写入 metrics（按 stage 分组）
    """

    enabled: bool = True

    def __post_init__(self):
        self.metrics = MetricRecorder(enabled=self.enabled)
        # timeline: OrderedDict[stage, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        record=True  : 叶子节点，耗时写入 timeline
        record=False : 父级 scope，不产生副作用
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled or not record:
                yield
                return

            start = time.perf_counter()
            try:
                yield
            finally:
                inst.timeline[name] = time.perf_counter() - start

        return _ctx()

    def collapse_report(self, label: str) -> CollapseReport:
        return CollapseReport(label, self.timeline, self.metrics)

    def log_report(self, label: str):
        self.collapse_report(label).log()

    def reset(self):
        self.timeline.clear()
        self.metrics.clear()


# -------------------------------------------------------------
# No-op Instrumentation（禁用 observability）
# -------------------------------------------------------------
class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def collapse_report(self, label: str) -> Optional[CollapseReport]:
        return None

    def log_report(self, label: str):
        pass

    def reset(self):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
