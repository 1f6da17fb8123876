"""Output document published for the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Tuple

from .composition import RankedComposition

# Bump only on breaking changes to the JSON layout.
SCHEMA_VERSION = 1


@dataclass(frozen=True)
class DocumentMeta:
    platform: str
    region: str
    queue_filter: Tuple[int, ...]
    sample_match_count: int
    patch: str
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "generatedAt": self.generated_at.isoformat(timespec="seconds").replace("+00:00", "Z"),
            "platform": self.platform,
            "region": self.region,
            "queueFilter": list(self.queue_filter),
            "sampleMatchCount": self.sample_match_count,
            "patch": self.patch,
        }


@dataclass(frozen=True)
class OutputDocument:
    meta: DocumentMeta
    comps: List[RankedComposition] = field(default_factory=list)
    schema_version: int = SCHEMA_VERSION

    @property
    def is_empty(self) -> bool:
        return not self.comps

    def to_dict(self) -> dict:
        return {
            "schemaVersion": self.schema_version,
            "meta": self.meta.to_dict(),
            "comps": [c.to_dict() for c in self.comps],
        }
