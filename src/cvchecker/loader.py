"""
CV loader for the CV checker.
Reads a CV document from YAML or JSON in either the web client or backend shape.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from shared.models import CVData
from shared.utils import read_document


class CVLoader:
    """Loads CV data for analysis."""

    def __init__(self, cv_path: Optional[Path] = None):
        self.cv_path = cv_path
        self._cv_data: Optional[CVData] = None

    def load(self, path: Optional[Path] = None) -> CVData:
        """Load CV from file. A top-level ``cv`` or ``data`` key is unwrapped."""
        path = path or self.cv_path
        if not path:
            raise ValueError("No CV path specified")

        data = read_document(Path(path))

        if isinstance(data, dict):
            for key in ("cv", "data"):
                if isinstance(data.get(key), dict):
                    data = data[key]
                    break

        if not isinstance(data, dict):
            raise ValueError(f"CV file must contain a mapping: {path}")

        self._cv_data = CVData.model_validate(data)
        logger.info(f"Loaded CV for: {self._cv_data.personal_info.full_name or '<unnamed>'}")
        return self._cv_data

    @property
    def cv_data(self) -> CVData:
        """Get loaded CV data."""
        if self._cv_data is None:
            self._cv_data = self.load()
        return self._cv_data


def load_cv(path: Path) -> CVData:
    """Load a CV document from a YAML or JSON file."""
    return CVLoader(path).load()
