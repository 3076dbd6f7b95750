"""Solc Executor.

This module runs a single solc command via subprocess and maps the outcome
onto the solbuild error types.

Design:
    - One blocking subprocess.run per call, no timeout
    - Only the exit status decides success; output is never parsed
    - Output is either inherited from the caller or discarded (silent mode)
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from .errors import ExecutionError, SpawnError

logger = logging.getLogger(__name__)


class SolcExecutor:
    """Executes solc commands in a working directory.

    Messages are passed in by the caller so failures name the step that
    failed (compiling or linking).
    """

    def __init__(self, stage: str, spawn_message: str, failure_message: str):
        """Initialize executor.

        Args:
            stage: Operation name carried by raised errors ("compile"/"link")
            spawn_message: Prefix used when the process cannot be started
            failure_message: Message used when the process exits non-zero
        """
        self.stage = stage
        self.spawn_message = spawn_message
        self.failure_message = failure_message

    def run(self, cmd: List[str], cwd: Path, silent: bool = False) -> int:
        """Run a command to completion.

        Args:
            cmd: Full argv, command prefix included
            cwd: Working directory for the child
            silent: Discard stdout/stderr instead of inheriting them

        Returns:
            The exit status (always 0)

        Raises:
            SpawnError: If the process cannot be started
            ExecutionError: If the process exits with a non-zero status
        """
        stream: Optional[int] = subprocess.DEVNULL if silent else None

        logger.debug(f"Running in {cwd}: {subprocess.list2cmdline(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd),
                stdout=stream,
                stderr=stream,
                check=False
            )
        except OSError as e:
            logger.error(f"{self.spawn_message}: {e}")
            raise SpawnError(f"{self.spawn_message}: {e}", self.stage) from e

        if result.returncode != 0:
            logger.error(f"{self.failure_message} (exit status {result.returncode})")
            raise ExecutionError(
                self.failure_message, self.stage, returncode=result.returncode
            )

        return result.returncode
