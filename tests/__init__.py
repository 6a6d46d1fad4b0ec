"""Test suite for Truffle Config.

Run tests with:
    pytest tests/
    pytest tests/unit/ -v
"""
