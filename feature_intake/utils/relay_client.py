import logging
from typing import Optional

import requests
from feature_intake.core.config import Settings
from feature_intake.models.feature_request import FeatureRequest


logger = logging.getLogger(__name__)


class RelayError(RuntimeError):
    def __init__(self, message: str, record: Optional[FeatureRequest] = None):
        super().__init__(message)
        self.record = record


def format_issue_body(record: FeatureRequest) -> str:
    components = ", ".join(record.affected_components) or "-"
    return (
        "## Description\n"
        f"{record.description}\n\n"
        "## Acceptance Criteria\n"
        f"{record.acceptance_criteria}\n\n"
        f"**Priority:** {record.priority}\n"
        f"**Target Timeline:** {record.target_timeline or '-'}\n"
        f"**Affected Components:** {components}\n\n"
        "## Example Usage\n"
        f"{record.example_usage or '-'}\n\n"
        "## Technical Constraints\n"
        f"{record.technical_constraints or '-'}\n\n"
        "---\n"
        f"Submitted: {record.created_at.isoformat()}\n"
        f"Feature Request ID: {record.id}\n"
    )


def build_issue_payload(record: FeatureRequest) -> dict:
    return {
        "title": record.title,
        "body": format_issue_body(record),
        "labels": ["feature-request", f"priority:{record.priority}"],
    }


def relay_feature_request(record: FeatureRequest, settings: Settings) -> dict:
    """Crea la issue en el endpoint externo configurado. Un único intento."""
    url = settings.github_mcp_server_url
    headers = {"Content-Type": "application/json"}
    if settings.github_mcp_token:
        headers["Authorization"] = f"Bearer {settings.github_mcp_token}"

    try:
        response = requests.post(
            url,
            json=build_issue_payload(record),
            headers=headers,
            timeout=settings.relay_timeout,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        content = getattr(exc.response, "text", "")
        if content:
            logger.error("Relay request failed: %s", content)
        else:
            logger.error("Relay request failed: %s", exc)
        raise RelayError(
            f"Error relaying feature request to {url}: {content or exc}", record
        ) from exc

    if not 200 <= response.status_code < 300:
        logger.error("Relay answered with status %s", response.status_code)
        raise RelayError(
            f"Error relaying feature request to {url}: unexpected status {response.status_code}", record
        )

    logger.info("Feature request %s relayed to %s", record.id, url)
    try:
        return response.json()
    except ValueError:
        return {}
