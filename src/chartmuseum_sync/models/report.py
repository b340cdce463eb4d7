"""Sync result models."""

from __future__ import annotations

from dataclasses import dataclass, field

from chartmuseum_sync.models import TransferStage
from chartmuseum_sync.models.chart import chart_label


@dataclass
class TransferFailure:
    chart: str
    version: str
    server: str
    stage: TransferStage
    cause: str

    @property
    def label(self) -> str:
        return chart_label(self.chart, self.version)


@dataclass
class SyncReport:
    source: str
    destination: str
    total: int = 0
    synced: list[str] = field(default_factory=list)
    failures: list[TransferFailure] = field(default_factory=list)

    @property
    def synced_count(self) -> int:
        return len(self.synced)

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    @property
    def summary(self) -> dict[str, int]:
        return {
            "pending": self.total,
            "synced": self.synced_count,
            "failed": self.failed_count,
        }
