from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger


# Make the flat-layout package importable when running `pytest` without
# installing the project.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from isexecutable import host  # noqa: E402


@pytest.fixture(autouse=True)
def clear_host_cache():
    host.host_platform.cache_clear()
    host.executable_extensions.cache_clear()
    yield
    host.host_platform.cache_clear()
    host.executable_extensions.cache_clear()


@pytest.fixture()
def make_file(tmp_path: Path):
    def _make(name: str, mode: int) -> Path:
        path = tmp_path / name
        path.write_text("#!/bin/sh\n", encoding="utf-8")
        path.chmod(mode)
        return path

    return _make


@pytest.fixture()
def reset_logger():
    # the CLI callback points loguru at the runner's stream, which is closed afterwards
    yield
    logger.remove()
