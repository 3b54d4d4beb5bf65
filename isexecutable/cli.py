import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Union

import typer
from loguru import logger

from isexecutable.query import ExecutabilityOptions, is_executable


EXIT_NOT_EXECUTABLE = 1
EXIT_ERROR = 2

app = typer.Typer()


@app.callback()
def main(verbose: bool = False) -> None:
    logger.remove()
    logger.add(sys.stderr, level="TRACE" if verbose else "INFO")


async def _check_paths(
    paths: List[Path], options: ExecutabilityOptions
) -> List[Union[bool, BaseException]]:
    return await asyncio.gather(
        *(is_executable(path, options) for path in paths), return_exceptions=True
    )


@app.command()
def check(
    paths: List[Path],
    may_not_exist: bool = False,
    uid: Optional[int] = None,
    gid: Optional[int] = None,
) -> None:
    options = ExecutabilityOptions(may_not_exist=may_not_exist, uid=uid, gid=gid)
    results = asyncio.run(_check_paths(paths, options))

    exit_code = 0
    for path, result in zip(paths, results):
        if isinstance(result, BaseException):
            logger.error(f"Failed to check '{path}': {result}")
            exit_code = EXIT_ERROR
        elif result:
            logger.info(f"'{path}' is executable")
        else:
            logger.info(f"'{path}' is not executable")
            exit_code = max(exit_code, EXIT_NOT_EXECUTABLE)

    if exit_code != 0:
        sys.exit(exit_code)
    logger.success("All files are executable")


if __name__ == "__main__":
    app()
