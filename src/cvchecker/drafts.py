"""
CV draft persistence on top of an injected key-value store.

The web client keeps the CV being edited in browser storage; any
``MutableMapping[str, str]`` (a dict, a shelve, a cache client wrapper)
plays that role here.
"""

import json
from typing import MutableMapping, Union

from loguru import logger
from pydantic import ValidationError

from shared.models import CVData

DRAFT_KEY = "cvData"


class CVDraftStore:
    """Loads and saves the CV draft as JSON under a single key."""

    def __init__(self, storage: MutableMapping[str, str], key: str = DRAFT_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> CVData:
        """Return the stored draft, or an empty CV when nothing usable is stored."""
        raw = self.storage.get(self.key)
        if not raw:
            return CVData()

        try:
            return CVData.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Discarding unreadable CV draft: {e}")
            return CVData()

    def save(self, cv: Union[CVData, dict]) -> None:
        if not isinstance(cv, CVData):
            cv = CVData.model_validate(cv)
        self.storage[self.key] = json.dumps(cv.to_dict(), ensure_ascii=False)

    def reset(self) -> None:
        self.storage.pop(self.key, None)
