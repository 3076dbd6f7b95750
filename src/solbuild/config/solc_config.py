"""
Solc invocation settings.

Settings live in code only: there is no config file and no environment
variable lookup. Defaults reproduce the stock behaviour (plain `solc` on
POSIX, `cmd.exe /c solc.cmd` on Windows, unsorted sources, lenient linking).

Usage:
    config = SolcConfig(sort_sources=True, strict_link=True)
    compiler = config.create_compiler()
    linker = config.create_linker()
"""

from dataclasses import dataclass
from typing import Optional

from ..build.compiler import SolcCompiler
from ..build.linker import SolcLinker
from ..build.platform_command import CommandStrategy, PlatformCommandResolver
from ..build.source_scanner import SourceScanner


@dataclass
class SolcConfig:
    """Settings for compiling and linking with solc."""

    executable: str = "solc"
    windows_shell: str = "cmd.exe"
    windows_script: str = "solc.cmd"
    source_suffix: str = ".sol"
    optimize: bool = True
    sort_sources: bool = False
    strict_link: bool = False
    system: Optional[str] = None  # platform.system() override, mostly for tests

    def command_strategy(self) -> CommandStrategy:
        """Return the CommandStrategy for these settings."""
        if (
            self.system is None
            and self.executable == "solc"
            and self.windows_shell == "cmd.exe"
            and self.windows_script == "solc.cmd"
        ):
            return PlatformCommandResolver.default()

        return PlatformCommandResolver.resolve(
            system=self.system,
            executable=self.executable,
            windows_shell=self.windows_shell,
            windows_script=self.windows_script,
        )

    def create_compiler(self) -> SolcCompiler:
        return SolcCompiler(
            command=self.command_strategy(),
            scanner=SourceScanner(suffix=self.source_suffix, sort=self.sort_sources),
            optimize=self.optimize,
        )

    def create_linker(self) -> SolcLinker:
        return SolcLinker(command=self.command_strategy(), strict=self.strict_link)
