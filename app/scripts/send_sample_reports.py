"""
Send the built-in sample findings to a running instance's webhook. Run from project root:
  python -m app.scripts.send_sample_reports [--base-url URL] [--api-key KEY] [--severity LEVEL]
Example:
  python -m app.scripts.send_sample_reports --base-url http://localhost:8000 --severity critical
The API key defaults to WEBHOOK_API_KEY from the environment or .env.
"""
import argparse
import logging
import sys

import httpx

from app.core.config import get_settings
from app.core.security import WEBHOOK_API_KEY_HEADER
from app.schemas.reports import ReportSeverity, enum_values
from app.services.samples import sample_payloads

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def send_samples(
    client: httpx.Client,
    url: str,
    api_key: str,
    severity: str | None = None,
) -> int:
    """POST each sample payload; return the number that were rejected."""
    failures = 0
    for payload in sample_payloads(severity):
        resp = client.post(url, json=payload, headers={WEBHOOK_API_KEY_HEADER: api_key})
        if resp.status_code == 201:
            logger.info("Created report %s (%s)", resp.json().get("id"), payload["title"])
        else:
            failures += 1
            logger.error(
                "Rejected %r: status=%s body=%s",
                payload["title"],
                resp.status_code,
                resp.text,
            )
    return failures


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Send sample security reports to the webhook.")
    parser.add_argument("--base-url", default="http://localhost:8000", help="Server base URL")
    parser.add_argument("--api-key", default=None, help="Webhook API key (default: WEBHOOK_API_KEY)")
    parser.add_argument(
        "--severity",
        default=None,
        choices=enum_values(ReportSeverity),
        help="Only send the sample with this severity",
    )
    args = parser.parse_args(argv)

    api_key = args.api_key
    if api_key is None and settings.WEBHOOK_API_KEY is not None:
        api_key = settings.WEBHOOK_API_KEY.get_secret_value()
    if not api_key:
        print("No API key: pass --api-key or set WEBHOOK_API_KEY.", file=sys.stderr)
        return 1

    url = f"{args.base_url.rstrip('/')}{settings.API_V1_PREFIX}/webhook/security-report"
    try:
        with httpx.Client(timeout=settings.WEBHOOK_TEST_TIMEOUT_SEC) as client:
            failures = send_samples(client, url, api_key, args.severity)
    except httpx.HTTPError as e:
        logger.error("Could not reach %s: %s", url, e)
        return 1
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
