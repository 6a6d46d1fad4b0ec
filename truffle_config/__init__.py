"""Truffle build configuration.

Declares the Solidity compiler version and optimizer settings consumed by the
Truffle smart-contract build tool, and renders them as a JSON document or a
``truffle-config.js`` module.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Development status indicators
__status__ = "Alpha"
