"""Data models for cm-sync."""

from __future__ import annotations

import enum


class TransferStage(enum.Enum):
    FETCH = "fetch"
    READ = "read"
    UPLOAD = "upload"
