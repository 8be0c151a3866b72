"""Local key/value snapshot storage and the cart snapshot built on it."""

from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
import json

from ...domain.repositories import SnapshotRepository
from ...exceptions import SnapshotError
from ...error_handler import handle_errors, safe_execute
from ...logging_config import get_logger

logger = get_logger(__name__)

CART_KEY = "cart"


class FileSnapshotStore(SnapshotRepository):
    """JSON-file-backed implementation of SnapshotRepository.

    All keys live in one file; every ``set``/``delete`` rewrites it.
    """

    def __init__(self, path: str = "data/snapshot.json"):
        self.path = Path(path)
        self._values = self._load()

    def _load(self) -> Dict[str, str]:
        """Load stored values from file."""
        if self.path.exists():
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return {str(k): str(v) for k, v in data.items()}
                logger.warning(f"Ignoring snapshot with unexpected shape: {self.path}")
            except (OSError, ValueError) as e:
                logger.warning(f"Could not load snapshot: {e}")
        return {}

    @handle_errors(exception_type=SnapshotError, reraise=True)
    def _save(self, values: Dict[str, str]) -> None:
        """Write ``values`` to file, then make them the current values."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(values, f, indent=2, ensure_ascii=False)
        self._values = values

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._save({**self._values, key: value})

    def delete(self, key: str) -> bool:
        if key not in self._values:
            return False
        self._save({k: v for k, v in self._values.items() if k != key})
        return True


@dataclass
class CartLine:
    """A product snapshot and the quantity wanted."""
    product: Dict[str, Any]
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class CartSnapshot:
    """Reads and writes the cart under the ``cart`` key of a snapshot store."""

    def __init__(self, snapshots: SnapshotRepository):
        self._snapshots = snapshots

    def load(self) -> List[CartLine]:
        """Saved cart lines; a missing or unreadable snapshot is an empty cart."""
        raw = self._snapshots.get(CART_KEY)
        if raw is None:
            return []
        return safe_execute(
            lambda: [CartLine(product=line["product"], quantity=int(line["quantity"]))
                     for line in json.loads(raw)],
            "Failed to parse saved cart",
            default_return=[],
            exception_type=SnapshotError
        )

    def save(self, lines: List[CartLine]) -> None:
        self._snapshots.set(CART_KEY, json.dumps([asdict(line) for line in lines], default=_json_default))

    def clear(self) -> None:
        self._snapshots.set(CART_KEY, "[]")
