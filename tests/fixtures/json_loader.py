import copy
import json
from pathlib import Path
from typing import Any, Dict


class TestDataLoader:
    """Request payloads shared by the integration tests (test_data.json)"""

    __test__ = False

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def payload(cls, key: str, **overrides: Any) -> Dict[str, Any]:
        """Deep copy of a stored payload with fields replaced or added"""
        data = copy.deepcopy(cls.load()[key])
        data.update(overrides)
        return data
