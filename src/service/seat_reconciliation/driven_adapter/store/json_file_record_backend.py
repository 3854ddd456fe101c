"""
JSON File Record Backend

One file per record under DATA_DIR. Keys are sanitised to [A-Za-z0-9_-] so an
event id can never escape the data directory.
"""

from pathlib import Path
import re
from typing import Optional

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.seat_reconciliation.driven_adapter.store.record_backend import RecordBackend


_UNSAFE_CHARS = re.compile(r'[^A-Za-z0-9_-]')


def record_file_name(key: str) -> str:
    return f'{_UNSAFE_CHARS.sub("_", key)}.json'


class JsonFileRecordBackend(RecordBackend):
    def __init__(self, *, data_dir: Path) -> None:
        self.data_dir = anyio.Path(data_dir)

    def _path(self, key: str) -> anyio.Path:
        return self.data_dir / record_file_name(key)

    async def get(self, *, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not await path.exists():
            return None
        return await path.read_bytes()

    async def set(self, *, key: str, value: bytes) -> None:
        await self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        # Write then rename so readers never see a half-written record
        tmp_path = path.with_suffix('.json.tmp')
        await tmp_path.write_bytes(value)
        await tmp_path.replace(path)
        Logger.base.debug(f'💾 [STORE] Wrote {path.name} ({len(value)} bytes)')

    async def delete(self, *, key: str) -> None:
        await self._path(key).unlink(missing_ok=True)
