"""
Solidity library linker wrapper.

This module runs `solc --link` to replace library placeholders in a compiled
`.bin` file with deployed library addresses. solc rewrites the file in place.
"""

import logging
import os
import re
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from Crypto.Hash import keccak

from .errors import LibrarySpecifierError, ResolutionError, UnresolvedLibraryError
from .platform_command import CommandStrategy, PlatformCommandResolver
from .solc_executor import SolcExecutor

logger = logging.getLogger(__name__)

# Placeholders are 40 characters wide, the width of a hex address:
#   legacy:  __<unit:Name padded with '_'>__
#   0.5+:    __$<34 hex digits of the name hash>$__
PLACEHOLDER_PATTERN = re.compile(r'__\S{36}__')

ADDRESS_HEX_DIGITS = 40


@dataclass(frozen=True)
class LibrarySpecifier:
    """A `<source-unit>:<library-name>:<hex-address>` link mapping."""

    unit: str
    name: str
    address: str

    @staticmethod
    def parse(value: str) -> 'LibrarySpecifier':
        """
        Parse and validate a specifier string.

        The string is split from the right so a unit path containing ':'
        (e.g. a Windows drive) stays intact.

        Args:
            value: e.g. "test.sol:TestLibrary:0000...0001"

        Returns:
            LibrarySpecifier

        Raises:
            LibrarySpecifierError: If a part is missing or the address is not hex
        """
        parts = value.rsplit(':', 2)
        if len(parts) != 3 or not all(parts):
            raise LibrarySpecifierError(
                f"Invalid library specifier {value!r}: expected <unit>:<library>:<address>"
            )

        unit, name, address = parts
        digits = address[2:] if address.lower().startswith('0x') else address
        if not digits or any(c not in string.hexdigits for c in digits):
            raise LibrarySpecifierError(
                f"Invalid library address in {value!r}: {address!r} is not hexadecimal"
            )
        if len(digits) > ADDRESS_HEX_DIGITS:
            raise LibrarySpecifierError(
                f"Invalid library address in {value!r}: more than {ADDRESS_HEX_DIGITS} hex digits"
            )

        return LibrarySpecifier(unit=unit, name=name, address=address)

    @property
    def qualified_name(self) -> str:
        return f"{self.unit}:{self.name}"

    def placeholders(self) -> List[str]:
        """
        Placeholders solc emits for this library, legacy form first.

        Legacy solc pads the qualified name (cut to 36 characters) with '_';
        solc 0.5+ uses the first 34 hex digits of its keccak256 hash.
        """
        legacy = '__' + self.qualified_name[:36].ljust(38, '_')
        digest = keccak.new(digest_bits=256, data=self.qualified_name.encode('utf-8'))
        hashed = '__$' + digest.hexdigest()[:34] + '$__'
        return [legacy, hashed]

    def __str__(self) -> str:
        return f"{self.unit}:{self.name}:{self.address}"


@dataclass
class LinkRequest:
    """Arguments for one solc link run."""

    target: str
    libraries: List[LibrarySpecifier] = field(default_factory=list)

    def to_args(self) -> List[str]:
        """Render the solc argument list (command prefix excluded)."""
        args = ['--link']
        for library in self.libraries:
            args.extend(['--libraries', str(library)])
        args.append(self.target)
        return args


@dataclass
class LinkResult:
    """Result of a successful link."""

    target_path: Path
    libraries: List[LibrarySpecifier]
    command: List[str]
    returncode: int


def find_placeholders(bytecode: str) -> List[str]:
    """
    Find unresolved library placeholders in hex bytecode text.

    Comment lines (`// $...$ -> unit:Name`) emitted by newer solc versions are
    ignored.

    Args:
        bytecode: Contents of a .bin file

    Returns:
        Distinct placeholders in order of first appearance
    """
    found: List[str] = []
    for line in bytecode.splitlines():
        if line.lstrip().startswith('//'):
            continue
        for match in PLACEHOLDER_PATTERN.findall(line):
            if match not in found:
                found.append(match)
    return found


class SolcLinker:
    """
    Wrapper for `solc --link`.

    Linker output is discarded. By default a specifier that matches no
    placeholder is not an error, since solc itself reports success. With
    `strict` set, the target is checked before solc runs and any specifier
    without a placeholder in it raises UnresolvedLibraryError. Placeholders
    that no specifier names are left alone in both modes.
    """

    def __init__(self, command: Optional[CommandStrategy] = None, strict: bool = False):
        """
        Initialize linker.

        Args:
            command: How to launch solc (default: host strategy)
            strict: Fail when a specifier matches no placeholder in the target
        """
        self.command = command or PlatformCommandResolver.default()
        self.strict = strict
        self.executor = SolcExecutor(
            stage='link',
            spawn_message='Error linking solidity contracts',
            failure_message='There was an error while linking contracts code.'
        )

    def link(
        self,
        libraries: Iterable[Union[str, LibrarySpecifier]],
        target: str,
        path: Union[str, Path]
    ) -> LinkResult:
        """
        Link libraries into a compiled bytecode file.

        Args:
            libraries: Specifiers, in the order they are passed to solc
            target: Bytecode file name, relative to `path`
            path: Working directory for solc

        Returns:
            LinkResult describing the run

        Raises:
            LibrarySpecifierError: If a specifier string is malformed
            ResolutionError: If `path` is not a readable directory
            UnresolvedLibraryError: In strict mode, if a specifier matches no
                placeholder (raised before solc runs)
            SpawnError: If solc cannot be started
            ExecutionError: If solc exits with a non-zero status
        """
        specifiers = [
            lib if isinstance(lib, LibrarySpecifier) else LibrarySpecifier.parse(lib)
            for lib in libraries
        ]
        workdir = Path(path)
        self._check_workdir(workdir)

        target_path = workdir / target
        if self.strict:
            self._check_matched(target_path, specifiers)

        request = LinkRequest(target=target, libraries=specifiers)
        cmd = self.command.command() + request.to_args()

        logger.info(f"Linking {len(specifiers)} library specifier(s) into {target_path}")
        returncode = self.executor.run(cmd, cwd=workdir, silent=True)

        return LinkResult(
            target_path=target_path,
            libraries=specifiers,
            command=cmd,
            returncode=returncode
        )

    @staticmethod
    def _check_workdir(workdir: Path) -> None:
        if not workdir.is_dir():
            raise ResolutionError(
                f"Link directory does not exist or is not a directory: {workdir}", 'link'
            )
        if not os.access(workdir, os.R_OK | os.X_OK):
            raise ResolutionError(f"Link directory is not readable: {workdir}", 'link')

    @staticmethod
    def _check_matched(target_path: Path, specifiers: List[LibrarySpecifier]) -> None:
        try:
            bytecode = target_path.read_text(encoding='utf-8')
        except OSError as e:
            raise ResolutionError(
                f"Cannot read bytecode {target_path}: {e}", 'link'
            ) from e

        present = set(find_placeholders(bytecode))
        unmatched = [
            spec for spec in specifiers
            if not present.intersection(spec.placeholders())
        ]
        if unmatched:
            names = ', '.join(str(spec) for spec in unmatched)
            logger.error(f"No placeholder in {target_path} for: {names}")
            raise UnresolvedLibraryError(
                f"Library specifier(s) match no placeholder in {target_path.name}: {names}",
                'link',
                specifiers=unmatched
            )
