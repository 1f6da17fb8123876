"""Atomic JSON publication of the ranked composition document."""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from core.logging import get_logger
from domain.entities import OutputDocument

logger = get_logger(__name__, service="publisher")


class Publisher:
    """
    Writes the OutputDocument next to its target and renames it into place.

    Readers only ever see the previous complete file or the new complete
    file. An empty document is never published: the temp file is discarded
    and the previous artifact stays as it was.
    """

    def __init__(self, output_path: Path) -> None:
        self.output_path = Path(output_path)

    def publish(self, document: OutputDocument) -> bool:
        """Returns True when the artifact was replaced."""
        directory = self.output_path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.output_path.name}.", suffix=".tmp")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document.to_dict(), fh, indent=2, ensure_ascii=False)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())

            if document.is_empty:
                logger.warning(f"no compositions this run, keeping existing {self.output_path}")
                tmp_path.unlink()
                return False

            # mkstemp creates 0600; the artifact is served to other readers
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.output_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.success(f"published {len(document.comps)} compositions to {self.output_path}")
        return True


def read_published(path: Path) -> Optional[Dict[str, Any]]:
    """The currently published document, or None when there is no usable data yet."""
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError):
        return None
    return data if isinstance(data, dict) else None
