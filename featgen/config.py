"""featgen configuration.

Typed configuration for the generator CLI and the webhook utility.  All
settings are Pydantic v2 models so they are validated at construction time
and can be built from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, Field


class WebhookConfig(BaseModel):
    """Settings for registering a repository webhook on GitHub or GitLab."""

    url: str = Field(
        default="http://your-n8n-instance.com/webhook",
        description="URL the Git platform delivers events to",
    )
    platform: Literal["github", "gitlab"] = Field(default="github")
    repo_owner: str = Field(default="your-org")
    repo_name: str = Field(default="your-repo")
    token: str | None = Field(default=None, description="Platform access token")
    secret: str = Field(default="your-webhook-secret", description="Shared webhook secret")
    timeout: int = Field(default=30, ge=1, description="Per-request timeout in seconds")

    @property
    def hooks_url(self) -> str:
        """REST endpoint that lists and creates hooks for the repository."""
        if self.platform == "github":
            return f"https://api.github.com/repos/{self.repo_owner}/{self.repo_name}/hooks"
        project = quote(f"{self.repo_owner}/{self.repo_name}", safe="")
        return f"https://gitlab.com/api/v4/projects/{project}/hooks"


def default_output_dir() -> Path:
    """Return the generator output directory from ``FEATGEN_OUTPUT_DIR``.

    Reads only that variable, so generation does not depend on the webhook
    settings being valid.
    """
    return Path(os.environ.get("FEATGEN_OUTPUT_DIR") or "./output")


class Config(BaseModel):
    """Global featgen configuration.

    Instances are typically created once by the webhook entry point via
    :meth:`from_env` and then passed to the code that needs them.
    """

    output_dir: Path = Field(default=Path("./output"))
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FEATGEN_OUTPUT_DIR, FEATGEN_HTTP_TIMEOUT,
            N8N_WEBHOOK_URL, GIT_PLATFORM, REPO_OWNER, REPO_NAME,
            GIT_PLATFORM_TOKEN, WEBHOOK_SECRET.
        """
        webhook_kwargs: dict[str, Any] = {}
        if os.environ.get("N8N_WEBHOOK_URL"):
            webhook_kwargs["url"] = os.environ["N8N_WEBHOOK_URL"]
        if os.environ.get("GIT_PLATFORM"):
            webhook_kwargs["platform"] = os.environ["GIT_PLATFORM"].strip().lower()
        if os.environ.get("REPO_OWNER"):
            webhook_kwargs["repo_owner"] = os.environ["REPO_OWNER"]
        if os.environ.get("REPO_NAME"):
            webhook_kwargs["repo_name"] = os.environ["REPO_NAME"]
        if os.environ.get("GIT_PLATFORM_TOKEN"):
            webhook_kwargs["token"] = os.environ["GIT_PLATFORM_TOKEN"]
        if os.environ.get("WEBHOOK_SECRET"):
            webhook_kwargs["secret"] = os.environ["WEBHOOK_SECRET"]
        if os.environ.get("FEATGEN_HTTP_TIMEOUT"):
            webhook_kwargs["timeout"] = int(os.environ["FEATGEN_HTTP_TIMEOUT"])

        return cls(
            output_dir=default_output_dir(),
            webhook=WebhookConfig(**webhook_kwargs),
        )
