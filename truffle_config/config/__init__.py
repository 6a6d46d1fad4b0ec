"""Build settings module."""

from .exporter import dump_json, render_truffle_config, to_document, write_output
from .loader import disabled_test_network, load, parse
from .settings import (
    BuildSettings,
    CompilersSettings,
    NetworkSettings,
    OptimizerSettings,
    SolcCompiler,
    SolcSettings,
)

__all__ = [
    "BuildSettings",
    "CompilersSettings",
    "NetworkSettings",
    "OptimizerSettings",
    "SolcCompiler",
    "SolcSettings",
    "disabled_test_network",
    "dump_json",
    "load",
    "parse",
    "render_truffle_config",
    "to_document",
    "write_output",
]
