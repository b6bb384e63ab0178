"""JSON file repository for the slideshow data document."""

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

from photo_slideshow.domain.models import DataStore, SlideshowSettings
from photo_slideshow.services.catalog import DataRepository

logger = logging.getLogger(__name__)


@dataclass
class JsonDataRepository(DataRepository):
    """Reads the data document from disk on every call."""

    path: Path
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def load(self) -> DataStore:
        """Load the document, falling back to defaults when the file is absent."""
        if not self.path.exists():
            logger.error("Data file not found: %s", self.path)
            return DataStore()
        with self._lock, self.path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        return DataStore.model_validate(raw)

    def save_settings(self, settings: SlideshowSettings) -> None:
        """Write settings back into the document, keeping other keys intact."""
        with self._lock:
            raw: dict[str, object] = {}
            if self.path.exists():
                with self.path.open("r", encoding="utf-8") as f:
                    raw = json.load(f)
            raw["settings"] = settings.model_dump(by_alias=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(raw, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
