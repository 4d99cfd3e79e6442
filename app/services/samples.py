"""Sample findings, one per severity, for exercising the webhook end to end."""

from typing import Any

SAMPLE_REPORTS: list[dict[str, Any]] = [
    {
        "name": "Critical: GitHub Advisory",
        "payload": {
            "source": "github-advisory",
            "severity": "critical",
            "title": "CVE-2025-1234 - Remote Code Execution in express",
            "summary": (
                "A critical vulnerability allows remote code execution via crafted HTTP "
                "request headers in express@4.17.1. Upgrade to express@4.18.3 or later."
            ),
            "rawData": {
                "cve": "CVE-2025-1234",
                "package": "express",
                "affectedVersion": "< 4.18.3",
                "fixedVersion": "4.18.3",
            },
        },
    },
    {
        "name": "High: npm audit",
        "payload": {
            "source": "npm-audit",
            "severity": "high",
            "title": "Prototype Pollution in lodash",
            "summary": (
                "lodash@4.17.20 has a known high-severity prototype pollution "
                "vulnerability. Update to lodash@4.17.21."
            ),
            "rawData": {
                "package": "lodash",
                "currentVersion": "4.17.20",
                "advisoryUrl": "https://github.com/advisories/GHSA-jf85-cpcp-j695",
            },
        },
    },
    {
        "name": "Moderate: SSL certificate expiring",
        "payload": {
            "source": "ssl-check",
            "severity": "moderate",
            "title": "SSL certificate expiring in 14 days",
            "summary": (
                "The SSL certificate for api.example.com will expire on 2025-08-01. "
                "Renew the certificate to prevent service disruption."
            ),
            "rawData": {
                "domain": "api.example.com",
                "expiresAt": "2025-08-01T00:00:00Z",
                "daysRemaining": 14,
            },
        },
    },
    {
        "name": "Low: npm audit",
        "payload": {
            "source": "npm-audit",
            "severity": "low",
            "title": "Regular Expression Denial of Service in semver",
            "summary": (
                "semver@5.7.1 is vulnerable to ReDoS via long version strings. Impact is "
                "minimal for most use cases. Upgrade to semver@5.7.2."
            ),
            "rawData": {
                "package": "semver",
                "currentVersion": "5.7.1",
                "fixedVersion": "5.7.2",
            },
        },
    },
    {
        "name": "Info: SSL certificate valid",
        "payload": {
            "source": "ssl-check",
            "severity": "info",
            "title": "SSL certificate is valid",
            "summary": (
                "The SSL certificate for app.example.com is valid and expires in 245 days. "
                "No action required."
            ),
            "rawData": {
                "domain": "app.example.com",
                "expiresAt": "2026-10-15T00:00:00Z",
                "daysRemaining": 245,
            },
        },
    },
]


def sample_payloads(severity: str | None = None) -> list[dict[str, Any]]:
    """Return sample webhook payloads, optionally only those of one severity."""
    return [
        sample["payload"]
        for sample in SAMPLE_REPORTS
        if severity is None or sample["payload"]["severity"] == severity
    ]
