import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from platform import system
from typing import Mapping, Optional, Tuple

from isexecutable.errors import IdentityUnavailable


PATHEXT_ENV = "PATHEXT"
PATHEXT_SEPARATOR = ";"


class HostPlatform(Enum):
    POSIX = "posix"
    WINDOWS = "windows"


@dataclass(frozen=True)
class Identity:
    uid: int
    gid: int


@lru_cache(maxsize=None)
def host_platform() -> HostPlatform:
    if system() == "Windows":
        return HostPlatform.WINDOWS
    return HostPlatform.POSIX


def parse_path_ext(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    """Parse a PATHEXT-like value such as '.COM;.EXE;.BAT'.

    Returns None when the value is unset or holds no extensions, which means
    every regular file is treated as executable.
    """
    if value is None:
        return None
    extensions = tuple(
        ext.strip() for ext in value.split(PATHEXT_SEPARATOR) if ext.strip()
    )
    return extensions or None


def path_ext_from_env(environ: Mapping[str, str]) -> Optional[Tuple[str, ...]]:
    return parse_path_ext(environ.get(PATHEXT_ENV))


@lru_cache(maxsize=None)
def executable_extensions() -> Optional[Tuple[str, ...]]:
    # read once, treated as read-only for the process lifetime
    return path_ext_from_env(os.environ)


def _process_id(getter_name: str) -> Optional[int]:
    getter = getattr(os, getter_name, None)
    if getter is None:
        return None
    return getter()


def resolve_identity(uid: Optional[int] = None, gid: Optional[int] = None) -> Identity:
    """Identity used for POSIX permission checks.

    Explicit ids win, otherwise the effective ids of the current process are
    used. Only the missing ones are looked up.
    """
    if gid is None:
        gid = _process_id("getegid")
        if gid is None:
            raise IdentityUnavailable("group ID")
    if uid is None:
        uid = _process_id("geteuid")
        if uid is None:
            raise IdentityUnavailable("user ID")
    return Identity(uid=uid, gid=gid)
