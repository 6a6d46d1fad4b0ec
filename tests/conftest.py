"""Pytest configuration and shared fixtures for Truffle Config tests."""

import json

from pathlib import Path
from typing import Any, Dict

import pytest


@pytest.fixture
def declared_document() -> Dict[str, Any]:
    """The declared settings document."""
    return {
        "compilers": {
            "solc": {
                "version": "0.8.4",
                "settings": {"optimizer": {"enabled": True}},
            }
        }
    }


@pytest.fixture
def networked_document(declared_document) -> Dict[str, Any]:
    """Settings document with the test network enabled and optimizer runs."""
    document = json.loads(json.dumps(declared_document))
    document["compilers"]["solc"]["settings"]["optimizer"]["runs"] = 200
    document["networks"] = {
        "test": {"host": "127.0.0.1", "port": 9545, "network_id": "*"}
    }
    return document


@pytest.fixture
def write_document(tmp_path):
    """Write a settings document (dict or raw text) and return its path."""

    def _write(document: Any, name: str = "settings.json") -> Path:
        path = tmp_path / name
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
