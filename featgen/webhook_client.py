"""Async client for registering repository webhooks on GitHub or GitLab.

Wraps the platforms' hook endpoints (``POST``/``GET`` on
``/repos/<owner>/<repo>/hooks`` or ``/projects/<id>/hooks``) so external
automation such as an n8n workflow receives push, pull/merge request and tag
events.  Transport and HTTP failures are returned as structured responses
rather than raised.

Typical usage::

    client = GitWebhookClient(Config.from_env().webhook)
    resp = await client.create_webhook()
    if resp.success:
        print(resp.data)

The module doubles as the ``featgen-webhook`` command.
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import httpx
from pydantic import BaseModel, Field

from .config import Config, WebhookConfig
from .utils import console, print_error, print_success

USER_AGENT = "n8n-webhook-setup"

GITHUB_EVENTS: list[str] = [
    "push",
    "pull_request",
    "pull_request_review",
    "create",
    "delete",
]


class WebhookResponse(BaseModel):
    """Structured result of one webhook API call."""

    success: bool = Field(default=True, description="Whether the request succeeded")
    status_code: int | None = Field(default=None, description="HTTP status, if a response arrived")
    data: Any = Field(default=None, description="Decoded JSON body on success")
    error: str | None = Field(default=None, description="Error message on failure")


class GitWebhookClient:
    """Creates and lists repository webhooks through the platform REST API."""

    def __init__(self, config: WebhookConfig) -> None:
        self.config = config

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our timeout."""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.timeout, connect=10.0),
        )

    def headers(self, *, with_body: bool = False) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.config.token or ''}",
            "User-Agent": USER_AGENT,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def build_payload(self) -> dict[str, Any]:
        """Return the hook definition for the configured platform."""
        if self.config.platform == "github":
            return {
                "name": "web",
                "active": True,
                "events": list(GITHUB_EVENTS),
                "config": {
                    "url": self.config.url,
                    "content_type": "json",
                    "insecure_ssl": "0",
                    "secret": self.config.secret,
                },
            }
        return {
            "url": self.config.url,
            "push_events": True,
            "merge_requests_events": True,
            "tag_push_events": True,
            "token": self.config.secret,
            "enable_ssl_verification": True,
        }

    async def _request(self, method: str, action: str, **kwargs: Any) -> WebhookResponse:
        url = self.config.hooks_url
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return WebhookResponse(
                    success=True,
                    status_code=response.status_code,
                    data=response.json() if response.content else None,
                )
        except httpx.ConnectError:
            return WebhookResponse(
                success=False,
                error=f"Cannot connect to {url} while {action}.",
            )
        except httpx.TimeoutException:
            return WebhookResponse(
                success=False,
                error=f"Request to {url} timed out after {self.config.timeout}s.",
            )
        except httpx.HTTPStatusError as exc:
            return WebhookResponse(
                success=False,
                status_code=exc.response.status_code,
                error=(
                    f"Error {action}: HTTP {exc.response.status_code}: "
                    f"{exc.response.text[:500]}"
                ),
            )
        except (httpx.HTTPError, ValueError) as exc:
            return WebhookResponse(
                success=False,
                error=f"Unexpected error {action}: {exc}",
            )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def create_webhook(self) -> WebhookResponse:
        """Register the webhook on the configured repository."""
        return await self._request(
            "POST",
            "creating webhook",
            headers=self.headers(with_body=True),
            content=json.dumps(self.build_payload()),
        )

    async def list_webhooks(self) -> WebhookResponse:
        """Return the hooks currently registered on the repository."""
        return await self._request("GET", "listing webhooks", headers=self.headers())


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


_ENV_HELP = (
    "Environment variables:\n"
    "  N8N_WEBHOOK_URL     - Your n8n webhook URL\n"
    '  GIT_PLATFORM        - "github" or "gitlab"\n'
    "  REPO_OWNER          - Repository owner/organization\n"
    "  REPO_NAME           - Repository name\n"
    "  GIT_PLATFORM_TOKEN  - Access token (required)\n"
    "  WEBHOOK_SECRET      - Webhook secret (optional)\n"
)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``featgen-webhook``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="featgen-webhook",
        description="Set up a repository webhook that triggers n8n workflows",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_ENV_HELP,
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="create",
        choices=["create", "list"],
        help="create a webhook (default) or list existing ones",
    )
    args = parser.parse_args(argv)

    config = Config.from_env()
    if not config.webhook.token:
        print_error("Error: GIT_PLATFORM_TOKEN environment variable is required")
        sys.exit(1)

    client = GitWebhookClient(config.webhook)
    if args.command == "create":
        result = asyncio.run(client.create_webhook())
        success_message = "Webhook created successfully!"
    else:
        result = asyncio.run(client.list_webhooks())
        success_message = "Existing webhooks:"

    if not result.success:
        print_error(result.error or "Webhook request failed")
        sys.exit(1)

    print_success(success_message)
    console.print_json(data=result.data)


if __name__ == "__main__":
    main()
