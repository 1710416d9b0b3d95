"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the tfmdoc test suite.
"""

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (filesystem, full CLI runs)"
    )


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(mark.name == "integration" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset logging global state after each test.

    Removes the path-named loggers ("/", "/render", ...) created by
    LoggerFactory so handlers bound to old streams do not leak.
    """
    original_class = logging.getLoggerClass()

    yield

    logging.setLoggerClass(original_class)
    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/"):
            del logging.root.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Keep TFMDOC_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("TFMDOC_"):
            monkeypatch.delenv(key)


@pytest.fixture
def inspect_data() -> dict:
    """
    terraform-config-inspect style output for a small module.

    Items are deliberately listed out of alphabetical order.
    """
    return {
        "path": "modules/bucket",
        "variables": {
            "zeta": {
                "name": "zeta",
                "type": "string",
                "description": "Last variable",
                "default": None,
                "required": True,
                "pos": {"filename": "modules/bucket/variables.tf", "line": 9},
            },
            "alpha": {
                "name": "alpha",
                "type": "list(string)",
                "description": "First line\nsecond line",
                "default": [],
                "required": False,
                "pos": {"filename": "modules/bucket/variables.tf", "line": 1},
            },
            "mu": {
                "name": "mu",
                "type": "",
                "description": "",
                "required": True,
                "pos": {"filename": "modules/bucket/variables.tf", "line": 5},
            },
        },
        "outputs": {
            "bucket_id": {
                "name": "bucket_id",
                "description": "Bucket ID",
                "sensitive": False,
                "pos": {"filename": "modules/bucket/outputs.tf", "line": 1},
            },
            "arn": {
                "name": "arn",
                "description": "Bucket ARN",
                "pos": {"filename": "modules/bucket/outputs.tf", "line": 5},
            },
        },
        "managed_resources": {
            "aws_s3_bucket.this": {
                "mode": "managed",
                "type": "aws_s3_bucket",
                "name": "this",
                "provider": {"name": "aws"},
                "pos": {"filename": "modules/bucket/main.tf", "line": 1},
            },
            "aws_s3_bucket_policy.this": {
                "mode": "managed",
                "type": "aws_s3_bucket_policy",
                "name": "this",
                "provider": {"name": "aws"},
                "pos": {"filename": "modules/bucket/main.tf", "line": 10},
            },
            "aws_kms_key.bucket": {
                "mode": "managed",
                "type": "aws_kms_key",
                "name": "bucket",
                "provider": {"name": "aws"},
                "pos": {"filename": "modules/bucket/kms.tf", "line": 3},
            },
        },
        "data_resources": {
            "data.aws_iam_policy_document.bucket": {
                "mode": "data",
                "type": "aws_iam_policy_document",
                "name": "bucket",
                "provider": {"name": "aws"},
                "pos": {"filename": "modules/bucket/policy.tf", "line": 2},
            },
        },
        "module_calls": {
            "logging": {
                "name": "logging",
                "source": "../logging",
                "version": "",
                "pos": {"filename": "modules/bucket/main.tf", "line": 20},
            },
        },
        "diagnostics": [],
    }


@pytest.fixture
def inspect_file(tmp_path: Path, inspect_data: dict) -> Path:
    """inspect_data written to a JSON file."""
    path = tmp_path / "module.json"
    path.write_text(json.dumps(inspect_data))
    return path
