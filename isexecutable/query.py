from dataclasses import dataclass
from typing import Optional, Tuple

from loguru import logger

from isexecutable.file_utils import (
    FileMetadata,
    PathLike,
    read_metadata,
    read_metadata_async,
)
from isexecutable.host import (
    HostPlatform,
    executable_extensions,
    host_platform,
    resolve_identity,
)
from isexecutable.rules import PosixExecutabilityRule, WindowsExecutabilityRule


@dataclass(frozen=True)
class ExecutabilityOptions:
    """Options of a single executability check.

    Args:
        may_not_exist (bool): return False instead of raising when the file does
                              not exist or cannot be accessed
        gid (Optional[int]): effective group id for the POSIX check, the
                             process one by default
        uid (Optional[int]): effective user id for the POSIX check, the process
                             one by default
    """

    may_not_exist: bool = False
    gid: Optional[int] = None
    uid: Optional[int] = None


DEFAULT_OPTIONS = ExecutabilityOptions()


def decide(
    metadata: FileMetadata,
    file_path: PathLike,
    options: ExecutabilityOptions,
    platform: HostPlatform,
    extensions: Optional[Tuple[str, ...]],
) -> bool:
    # non-files are never executable, identity is not needed for them
    if not metadata.is_regular_file:
        return False
    if platform is HostPlatform.WINDOWS:
        return WindowsExecutabilityRule.evaluate(metadata, file_path, extensions)
    identity = resolve_identity(uid=options.uid, gid=options.gid)
    return PosixExecutabilityRule.evaluate(metadata, identity)


def _is_suppressed(error: OSError, options: ExecutabilityOptions) -> bool:
    return options.may_not_exist and isinstance(
        error, (FileNotFoundError, PermissionError)
    )


def _decide_on_host(
    metadata: FileMetadata, file_path: PathLike, options: ExecutabilityOptions
) -> bool:
    result = decide(
        metadata, file_path, options, host_platform(), executable_extensions()
    )
    logger.trace(f"'{file_path}' is {'' if result else 'not '}executable")
    return result


def is_executable_sync(
    file_path: PathLike, options: Optional[ExecutabilityOptions] = None
) -> bool:
    """Determine whether the file is executable on the current OS.

    Args:
        file_path (PathLike): path of the file, symlinks are followed
        options (Optional[ExecutabilityOptions]): check options

    Raises:
        OSError: file cannot be stat'ed and the error is not suppressed by
                 `may_not_exist`
        MetadataUnavailable: owner ids or mode of the file are not available
        IdentityUnavailable: effective ids of the process cannot be determined
    """
    options = options or DEFAULT_OPTIONS
    try:
        metadata = read_metadata(file_path)
    except OSError as error:
        if _is_suppressed(error, options):
            logger.debug(f"'{file_path}' is not accessible, treated as not executable: {error}")
            return False
        raise
    return _decide_on_host(metadata, file_path, options)


async def is_executable(
    file_path: PathLike, options: Optional[ExecutabilityOptions] = None
) -> bool:
    """Async variant of `is_executable_sync`, stat is done in a worker thread."""
    options = options or DEFAULT_OPTIONS
    try:
        metadata = await read_metadata_async(file_path)
    except OSError as error:
        if _is_suppressed(error, options):
            logger.debug(f"'{file_path}' is not accessible, treated as not executable: {error}")
            return False
        raise
    return _decide_on_host(metadata, file_path, options)
