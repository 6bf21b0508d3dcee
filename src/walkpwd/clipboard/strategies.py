"""
Clipboard delivery strategies for walkpwd.

Each strategy says whether it applies to the current environment and
tries to put text on the clipboard, raising StrategyFailedError when it
cannot. Helper-process strategies spawn the helper with a piped stdin,
write the text and close the pipe without waiting for the helper by
default.
"""

import logging
import os
import platform
import subprocess
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass

import pyperclip

from walkpwd.clipboard.exceptions import StrategyFailedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClipboardEnvironment:
    """Environment signals consulted by the fallback chain."""

    wayland: bool = False
    x11: bool = False
    system: str = ""

    @classmethod
    def detect(
        cls, environ: Mapping[str, str] | None = None, system: str | None = None
    ) -> "ClipboardEnvironment":
        """
        Capture display-server variables and the operating system.

        Args:
            environ: Environment mapping. Defaults to os.environ.
            system: Platform name. Defaults to platform.system().
        """
        if environ is None:
            environ = os.environ
        return cls(
            wayland="WAYLAND_DISPLAY" in environ,
            x11="DISPLAY" in environ,
            system=platform.system() if system is None else system,
        )

    @property
    def is_macos(self) -> bool:
        return self.system == "Darwin"


class ClipboardStrategy(ABC):
    """Abstract base class for a clipboard delivery mechanism."""

    name: str = "strategy"

    @abstractmethod
    def is_applicable(self, env: ClipboardEnvironment) -> bool:
        """Check whether this strategy should be tried in the given environment."""
        pass

    @abstractmethod
    def copy(self, text: str) -> None:
        """
        Put text on the clipboard.

        Raises:
            StrategyFailedError: If the mechanism is unavailable or fails.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class CommandStrategy(ClipboardStrategy):
    """Pipes the text into an external clipboard helper."""

    def __init__(
        self,
        args: list[str],
        applicable: Callable[[ClipboardEnvironment], bool],
        settle_delay: float = 0.0,
        wait_for_exit: bool = False,
        exit_timeout: float = 2.0,
    ):
        """
        Args:
            args: Helper command line.
            applicable: Predicate over the environment signals.
            settle_delay: Seconds to sleep after writing, giving the helper
                time to read the pipe before this process exits.
            wait_for_exit: Wait for the helper and require exit code 0.
            exit_timeout: Upper bound on that wait, in seconds.
        """
        self.args = args
        self.name = args[0]
        self._applicable = applicable
        self.settle_delay = settle_delay
        self.wait_for_exit = wait_for_exit
        self.exit_timeout = exit_timeout

    def is_applicable(self, env: ClipboardEnvironment) -> bool:
        return self._applicable(env)

    def copy(self, text: str) -> None:
        try:
            process = subprocess.Popen(
                self.args,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise StrategyFailedError(f"Cannot run {self.name}: {e}", self.name) from e

        try:
            process.stdin.write(text.encode("utf-8"))
            process.stdin.close()
        except OSError as e:
            self._discard(process)
            raise StrategyFailedError(
                f"Cannot write to {self.name}: {e}", self.name
            ) from e

        if self.wait_for_exit:
            try:
                returncode = process.wait(timeout=self.exit_timeout)
            except subprocess.TimeoutExpired as e:
                raise StrategyFailedError(
                    f"{self.name} did not exit within {self.exit_timeout}s", self.name
                ) from e
            if returncode != 0:
                raise StrategyFailedError(
                    f"{self.name} exited with status {returncode}", self.name
                )
        elif self.settle_delay > 0:
            time.sleep(self.settle_delay)

        logger.debug(f"Wrote {len(text)} characters to {self.name}")

    def _discard(self, process: subprocess.Popen) -> None:
        """Kill and reap a helper whose pipe broke."""
        try:
            process.stdin.close()
        except OSError:
            logger.debug(f"Closing the pipe to {self.name} failed")
        process.kill()
        process.wait()


class LibraryStrategy(ClipboardStrategy):
    """Generic clipboard access through pyperclip."""

    name = "pyperclip"

    def is_applicable(self, env: ClipboardEnvironment) -> bool:
        return True

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise StrategyFailedError(f"pyperclip failed: {e}", self.name) from e


def _wayland(env: ClipboardEnvironment) -> bool:
    return env.wayland


def _x11(env: ClipboardEnvironment) -> bool:
    return not env.wayland and env.x11


def _macos(env: ClipboardEnvironment) -> bool:
    return not env.wayland and not env.x11 and env.is_macos


def default_strategies(
    settle_delay: float = 0.1,
    wait_for_exit: bool = False,
    exit_timeout: float = 2.0,
    library_fallback: bool = True,
) -> list[ClipboardStrategy]:
    """
    Build the default fallback chain, highest priority first.

    Wayland helper, then the two X11 helpers, then the macOS helper, then
    the pyperclip library call.
    """
    options = {
        "settle_delay": settle_delay,
        "wait_for_exit": wait_for_exit,
        "exit_timeout": exit_timeout,
    }
    strategies: list[ClipboardStrategy] = [
        CommandStrategy(["wl-copy"], _wayland, **options),
        CommandStrategy(["xclip", "-selection", "clipboard"], _x11, **options),
        CommandStrategy(["xsel", "--clipboard", "--input"], _x11, **options),
        CommandStrategy(["pbcopy"], _macos, **options),
    ]
    if library_fallback:
        strategies.append(LibraryStrategy())
    return strategies
