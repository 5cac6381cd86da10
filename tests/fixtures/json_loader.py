import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

DATA_FILE = Path(__file__).parent / "test_data.json"


class TestDataLoader:
    """Request payloads shared by the API tests, read once from test_data.json"""

    __test__ = False

    _data: Optional[Dict[str, Any]] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(DATA_FILE) as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        """Fresh copy, so a test can't leak edits into the next one"""
        return copy.deepcopy(cls.load()[key])

    @classmethod
    def get_with(cls, key: str, **overrides) -> Dict[str, Any]:
        payload = cls.get(key)
        payload.update(overrides)
        return payload
