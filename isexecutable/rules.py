import ntpath
import os
from typing import Iterable, Optional

from isexecutable.errors import MetadataUnavailable
from isexecutable.file_utils import FileMetadata, PathLike
from isexecutable.host import Identity


OTHER_EXECUTE = 0o001
GROUP_EXECUTE = 0o010
OWNER_EXECUTE = 0o100


class PosixExecutabilityRule:
    """Execute permission from mode bits and the file owner ids."""

    @staticmethod
    def evaluate(metadata: FileMetadata, identity: Identity) -> bool:
        if not metadata.is_regular_file:
            return False

        if metadata.owner_group_id is None:
            raise MetadataUnavailable("group ID")
        if metadata.mode is None:
            raise MetadataUnavailable("mode")
        if metadata.owner_user_id is None:
            raise MetadataUnavailable("user ID")

        mode = metadata.mode
        return (
            bool(mode & OTHER_EXECUTE)
            or (bool(mode & GROUP_EXECUTE) and identity.gid == metadata.owner_group_id)
            or (bool(mode & OWNER_EXECUTE) and identity.uid == metadata.owner_user_id)
            # superuser may execute anything with at least one execute bit
            or (bool(mode & (OWNER_EXECUTE | GROUP_EXECUTE)) and identity.uid == 0)
        )


class WindowsExecutabilityRule:
    """Execute permission from the file extension and a PATHEXT-like list."""

    @staticmethod
    def extension(file_path: PathLike) -> str:
        # ntpath understands both separators, '.profile' has no extension
        return ntpath.splitext(os.fspath(file_path))[1]

    @classmethod
    def evaluate(
        cls,
        metadata: FileMetadata,
        file_path: PathLike,
        executable_extensions: Optional[Iterable[str]],
    ) -> bool:
        if not metadata.is_regular_file:
            return False
        if executable_extensions is None:
            return True
        known = {ext.lower() for ext in executable_extensions}
        return cls.extension(file_path).lower() in known
