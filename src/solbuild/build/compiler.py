"""
Solidity compiler wrapper.

This module drives solc to compile every contract in a directory, writing one
`<Contract>.bin` and one `<Contract>.abi` per top-level contract back into
that directory.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .errors import ResolutionError
from .platform_command import CommandStrategy, PlatformCommandResolver
from .solc_executor import SolcExecutor
from .source_scanner import SourceScanner

logger = logging.getLogger(__name__)


@dataclass
class CompileRequest:
    """Arguments for one solc compile run."""

    output_dir: Path
    sources: List[str] = field(default_factory=list)
    optimize: bool = True

    def to_args(self) -> List[str]:
        """Render the solc argument list (command prefix excluded)."""
        args = [
            '--bin',        # Contract bytecode
            '--abi',        # Contract ABI
            '--overwrite',  # Replace *.bin/*.abi left by a previous run
        ]
        if self.optimize:
            args.append('--optimize')
        args.extend(['-o', str(self.output_dir)])
        args.extend(self.sources)
        return args


@dataclass
class CompileResult:
    """Result of a successful compile."""

    output_dir: Path
    sources: List[str]
    command: List[str]
    returncode: int

    def artifacts(self) -> List[str]:
        """
        List contracts with both a .bin and an .abi in the output directory.

        This only reports what is on disk; it does not check the set against
        the compiled sources.
        """
        bins = {p.stem for p in self.output_dir.glob('*.bin')}
        abis = {p.stem for p in self.output_dir.glob('*.abi')}
        return sorted(bins & abis)


class SolcCompiler:
    """
    Wrapper for `solc` in compile mode.

    Finds the sources in a directory, runs solc over all of them at once with
    the directory as working directory, and raises if solc fails. Compiler
    diagnostics go straight to the caller's stdout/stderr.
    """

    def __init__(
        self,
        command: Optional[CommandStrategy] = None,
        scanner: Optional[SourceScanner] = None,
        optimize: bool = True
    ):
        """
        Initialize compiler.

        Args:
            command: How to launch solc (default: host strategy)
            scanner: Source discovery (default: unsorted `.sol` scanner)
            optimize: Pass --optimize to solc
        """
        self.command = command or PlatformCommandResolver.default()
        self.scanner = scanner or SourceScanner()
        self.optimize = optimize
        self.executor = SolcExecutor(
            stage='compile',
            spawn_message='Error compiling solidity contracts',
            failure_message='There was an error while compiling contracts code.'
        )

    def compile(self, path: Union[str, Path]) -> CompileResult:
        """
        Compile all Solidity files in a directory.

        An empty directory is not special-cased: solc still runs, with no
        input files, and its exit status decides the outcome.

        Args:
            path: Contracts directory; artifacts are written here

        Returns:
            CompileResult describing the run

        Raises:
            ResolutionError: If the path cannot be canonicalized or read
            SpawnError: If solc cannot be started
            ExecutionError: If solc exits with a non-zero status
        """
        output_dir = self._canonicalize(path)
        sources = self.scanner.scan(output_dir, stage='compile')

        request = CompileRequest(
            output_dir=output_dir,
            sources=sources,
            optimize=self.optimize
        )
        cmd = self.command.command() + request.to_args()

        logger.info(f"Compiling {len(sources)} contract source(s) in {output_dir}")
        returncode = self.executor.run(cmd, cwd=output_dir)

        return CompileResult(
            output_dir=output_dir,
            sources=sources,
            command=cmd,
            returncode=returncode
        )

    @staticmethod
    def _canonicalize(path: Union[str, Path]) -> Path:
        try:
            return Path(path).resolve(strict=True)
        except (OSError, RuntimeError) as e:
            logger.error(f"Error canonicalizing the contract path {path}: {e}")
            raise ResolutionError(
                f"Error canonicalizing the contract path: {e}", 'compile'
            ) from e
