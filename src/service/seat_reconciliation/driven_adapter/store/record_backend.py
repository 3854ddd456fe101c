"""
Record Backend

Byte-level get/set/delete by key. The three state stores serialize their records
with orjson and do not care where the bytes end up.
"""

from abc import ABC, abstractmethod
from typing import Optional


class RecordBackend(ABC):
    @abstractmethod
    async def get(self, *, key: str) -> Optional[bytes]:
        """None when the record does not exist"""
        pass

    @abstractmethod
    async def set(self, *, key: str, value: bytes) -> None:
        pass

    @abstractmethod
    async def delete(self, *, key: str) -> None:
        """Deleting a missing record is a no-op"""
        pass
