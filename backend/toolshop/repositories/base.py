"""
In-memory repository base

Collections are ordered lists of domain models. Writes follow three rules:
create with a timestamp-derived id, replace whole records by id, delete
by filtering.

Author: TM3
Date: 2026-10-19
"""
import logging
import time
from typing import Callable, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from toolshop.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_last_issued_id = 0


def timestamp_id() -> int:
    """
    Milliseconds since the epoch, bumped when needed so that ids issued
    within the same millisecond stay unique and increasing.
    """
    global _last_issued_id
    candidate = int(time.time() * 1000)
    if candidate <= _last_issued_id:
        candidate = _last_issued_id + 1
    _last_issued_id = candidate
    return candidate


class InMemoryRepository(Generic[ModelT]):
    """
    Repository over an in-process list of records

    Returned records are copies; the only way to change the collection
    is through add/update/delete.
    """

    model: Type[ModelT]
    entity_name: str = "Record"

    def __init__(self, records: Optional[Iterable[ModelT]] = None):
        self._records: List[ModelT] = [r.model_copy(deep=True) for r in (records or [])]

    def __len__(self) -> int:
        return len(self._records)

    def find_all(self) -> List[ModelT]:
        return [r.model_copy(deep=True) for r in self._records]

    def find_by_id(self, record_id) -> Optional[ModelT]:
        for record in self._records:
            if record.id == record_id:
                return record.model_copy(deep=True)
        return None

    def find_where(self, predicate: Callable[[ModelT], bool]) -> List[ModelT]:
        return [r.model_copy(deep=True) for r in self._records if predicate(r)]

    def add(self, data: BaseModel) -> ModelT:
        """Create a record from a create-schema, assigning a timestamp id"""
        record = self.model(id=timestamp_id(), **data.model_dump())
        self._records.append(record)
        logger.info(f"{self.entity_name} created: {record.id}")
        return record.model_copy(deep=True)

    def update(self, record: ModelT) -> ModelT:
        """Full-record replacement by id"""
        for index, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[index] = record.model_copy(deep=True)
                logger.info(f"{self.entity_name} replaced: {record.id}")
                return self._records[index].model_copy(deep=True)
        raise NotFoundError(self.entity_name, record.id)

    def delete(self, record_id) -> bool:
        """Filter the record out; returns False when nothing matched"""
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record_id]
        removed = before - len(self._records)
        if removed:
            logger.info(f"{self.entity_name} deleted: {record_id}")
        return removed > 0
