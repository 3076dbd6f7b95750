"""Platform-specific solc invocation.

On POSIX hosts solc is a real executable and is launched directly. On Windows
the npm-style install ships `solc.cmd`, a batch script that CreateProcess
cannot run on its own, so the call is wrapped in `cmd.exe /c`.
"""

import platform
from abc import ABC, abstractmethod
from typing import List, Optional


class CommandStrategy(ABC):
    """Produces the command prefix used to launch solc."""

    @abstractmethod
    def command(self) -> List[str]:
        """Return the argv prefix; solc arguments are appended to it."""
        pass


class DirectCommand(CommandStrategy):
    """Runs the executable by name, resolved through PATH at spawn time."""

    def __init__(self, executable: str = "solc"):
        self.executable = executable

    def command(self) -> List[str]:
        return [self.executable]

    def __repr__(self) -> str:
        return f"DirectCommand({self.executable!r})"


class ShellWrappedCommand(CommandStrategy):
    """Runs a script through the host command shell."""

    def __init__(self, shell: str = "cmd.exe", script: str = "solc.cmd"):
        self.shell = shell
        self.script = script

    def command(self) -> List[str]:
        return [self.shell, "/c", self.script]

    def __repr__(self) -> str:
        return f"ShellWrappedCommand({self.shell!r}, {self.script!r})"


class PlatformCommandResolver:
    """Selects the CommandStrategy for the current host."""

    _default: Optional[CommandStrategy] = None

    @staticmethod
    def resolve(
        system: Optional[str] = None,
        executable: str = "solc",
        windows_shell: str = "cmd.exe",
        windows_script: str = "solc.cmd",
    ) -> CommandStrategy:
        """Build the strategy for a host.

        Args:
            system: Host name as reported by platform.system() (default: current host)
            executable: Executable name used on POSIX hosts
            windows_shell: Shell used to run the script on Windows
            windows_script: Script name passed to the shell on Windows

        Returns:
            CommandStrategy for the host. Never raises; a missing executable
            shows up as a spawn failure when the command is run.
        """
        if system is None:
            system = platform.system()

        if system.lower() == "windows":
            return ShellWrappedCommand(windows_shell, windows_script)
        return DirectCommand(executable)

    @classmethod
    def default(cls) -> CommandStrategy:
        """Return the strategy for this host, resolved once per process."""
        if cls._default is None:
            cls._default = cls.resolve()
        return cls._default
