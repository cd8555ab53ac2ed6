"""Simple JSON based persistence for employees and leave applications."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Any, Callable, Dict, Generic, List, TypeVar

from .models import Employee, LeaveApplication


logger = logging.getLogger(__name__)

EMPLOYEES_FILE = "employees.json"
LEAVES_FILE = "leaves.json"

SOURCE_OK = "ok"
SOURCE_MISSING = "missing"
SOURCE_CORRUPT = "corrupt"

RecordT = TypeVar("RecordT")


@dataclass
class LoadResult(Generic[RecordT]):
    """Records read from a document and where they came from.

    ``source`` is ``"ok"`` when the document parsed, ``"missing"`` when it
    does not exist and ``"corrupt"`` when it exists but could not be read
    as a list of records. The last two always carry an empty list.
    """

    records: List[RecordT] = field(default_factory=list)
    source: str = SOURCE_OK

    @property
    def ok(self) -> bool:
        return self.source == SOURCE_OK


class RecordStore:
    """Whole-document load/save over ``employees.json`` and ``leaves.json``."""

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self.employees_path = self.data_dir / EMPLOYEES_FILE
        self.leaves_path = self.data_dir / LEAVES_FILE
        self._lock = Lock()

    def read_employees(self) -> LoadResult[Employee]:
        return self._read(self.employees_path, Employee.from_dict)

    def read_leaves(self) -> LoadResult[LeaveApplication]:
        return self._read(self.leaves_path, LeaveApplication.from_dict)

    def load_employees(self) -> List[Employee]:
        return self.read_employees().records

    def load_leaves(self) -> List[LeaveApplication]:
        return self.read_leaves().records

    def save_employees(self, employees: List[Employee]) -> None:
        self._write(self.employees_path, [employee.to_dict() for employee in employees])

    def save_leaves(self, leaves: List[LeaveApplication]) -> None:
        self._write(self.leaves_path, [leave.to_dict() for leave in leaves])

    def _read(
        self, path: Path, factory: Callable[[Dict[str, Any]], RecordT]
    ) -> LoadResult[RecordT]:
        with self._lock:
            try:
                raw = path.read_bytes()
            except FileNotFoundError:
                logger.info("%s does not exist, treating it as empty", path)
                return LoadResult(source=SOURCE_MISSING)
            except OSError:
                logger.warning("Could not read %s, treating it as empty", path, exc_info=True)
                return LoadResult(source=SOURCE_CORRUPT)

        try:
            data = json.loads(raw.decode("utf-8"))
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            records = [factory(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("%s is malformed (%s), treating it as empty", path, exc)
            return LoadResult(source=SOURCE_CORRUPT)
        return LoadResult(records=records)

    def _write(self, path: Path, payload: List[Dict[str, Any]]) -> None:
        try:
            text = json.dumps(payload, indent=2, sort_keys=True)
            with self._lock:
                path.parent.mkdir(parents=True, exist_ok=True)
                temp_path = path.with_suffix(".tmp")
                temp_path.write_text(text, encoding="utf-8")
                temp_path.replace(path)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to write %s", path)


__all__ = [
    "EMPLOYEES_FILE",
    "LEAVES_FILE",
    "LoadResult",
    "RecordStore",
    "SOURCE_CORRUPT",
    "SOURCE_MISSING",
    "SOURCE_OK",
]
