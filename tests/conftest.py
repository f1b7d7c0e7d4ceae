"""Shared pytest fixtures for the featgen test suite.

Provides reusable fixtures for:
- Temporary output directories
- A clean environment for configuration tests
- Webhook configurations for GitHub and GitLab
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from featgen.config import WebhookConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Output directory for generated files; not created up front."""
    return tmp_path / "output"


@pytest.fixture
def clean_env():
    """Run the test with an empty environment."""
    with patch.dict(os.environ, {}, clear=True):
        yield


# ---------------------------------------------------------------------------
# Webhook configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def github_config() -> WebhookConfig:
    return WebhookConfig(
        url="https://n8n.example.com/webhook/git",
        platform="github",
        repo_owner="acme",
        repo_name="shop",
        token="ghp_test",
        secret="s3cret",
    )


@pytest.fixture
def gitlab_config() -> WebhookConfig:
    return WebhookConfig(
        url="https://n8n.example.com/webhook/git",
        platform="gitlab",
        repo_owner="acme",
        repo_name="shop",
        token="glpat-test",
        secret="s3cret",
    )


