#!/usr/bin/env python3
"""
Windows Containers Preparation Utilities
Shared helpers: error types, fixed-interval polling and the oc CLI runner
"""

import asyncio
import logging
import subprocess
from typing import Awaitable, Callable, List, Optional


class Colors:
    """ANSI color codes for terminal output"""
    RED = '\033[0;31m'
    GREEN = '\033[0;32m'
    YELLOW = '\033[1;33m'
    NC = '\033[0m'


class ClusterStepError(Exception):
    """A preparation step could not be completed"""


class PollTimeoutError(ClusterStepError):
    """A polled resource never reached the expected state"""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts


async def poll_until(check: Callable[[], Awaitable[bool]],
                     max_attempts: int,
                     interval: float,
                     timeout_message: str = "Timeout waiting for resource",
                     on_retry: Optional[Callable[[int, int], None]] = None) -> int:
    """Evaluate ``check`` until it returns True.

    The check runs once up front and once more after each of at most
    ``max_attempts`` sleeps of ``interval`` seconds. Returns the number of
    sleeps taken; raises PollTimeoutError when the budget runs out.
    """
    attempt = 0
    while True:
        if await check():
            return attempt
        if attempt >= max_attempts:
            raise PollTimeoutError(timeout_message, attempt)
        attempt += 1
        if on_retry is not None:
            on_retry(attempt, max_attempts)
        await asyncio.sleep(interval)


class OcCommandRunner:
    """Thin wrapper around the OpenShift CLI"""

    def __init__(self, oc_binary: str = "oc", kubeconfig: Optional[str] = None):
        self.oc_binary = oc_binary
        self.kubeconfig = kubeconfig
        self.logger = logging.getLogger(f"{__name__}.oc")

    def build_command(self, args: List[str]) -> List[str]:
        cmd = [self.oc_binary]
        if self.kubeconfig:
            cmd.append(f"--kubeconfig={self.kubeconfig}")
        return cmd + list(args)

    def execute_oc_command(self, args: List[str], timeout: int = 60) -> subprocess.CompletedProcess:
        """Execute OpenShift CLI command with error handling"""
        cmd = self.build_command(args)
        try:
            self.logger.debug(f"Executing: {' '.join(cmd)}")
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False
            )

            if result.returncode != 0:
                self.logger.error(f"Command failed: {result.stderr}")

            return result

        except subprocess.TimeoutExpired:
            self.logger.error(f"Command timeout after {timeout}s: {' '.join(cmd)}")
            raise

    def get_nodes_wide(self, label_selector: str) -> str:
        """Return the ``oc get nodes -o wide`` table for a label selector"""
        result = self.execute_oc_command(["get", "nodes", "-l", label_selector, "-o", "wide"])
        if result.returncode != 0:
            raise ClusterStepError(f"Failed to list nodes with label {label_selector}: {result.stderr.strip()}")
        return result.stdout
