"""Configuration for solbuild."""

from .solc_config import SolcConfig

__all__ = [
    "SolcConfig",
]
