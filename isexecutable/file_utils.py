import asyncio
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from loguru import logger


PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class FileMetadata:
    is_regular_file: bool
    mode: Optional[int]
    owner_user_id: Optional[int]
    owner_group_id: Optional[int]

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileMetadata":
        st_mode = getattr(stat_result, "st_mode", None)
        return cls(
            is_regular_file=st_mode is not None and stat.S_ISREG(st_mode),
            mode=stat.S_IMODE(st_mode) if st_mode is not None else None,
            owner_user_id=getattr(stat_result, "st_uid", None),
            owner_group_id=getattr(stat_result, "st_gid", None),
        )


def read_metadata(path: PathLike) -> FileMetadata:
    # os.stat follows symlinks, a link to a regular file counts as that file
    stat_result = os.stat(path)
    logger.trace(f"Stat of '{Path(path)}': mode={oct(stat_result.st_mode)}")
    return FileMetadata.from_stat(stat_result)


async def read_metadata_async(path: PathLike) -> FileMetadata:
    return await asyncio.to_thread(read_metadata, path)
