from html import escape
from typing import List

from feature_intake.models.feature_request import FeatureRequest

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def success_fragment(record: FeatureRequest) -> str:
    return (
        '<div class="success-message">'
        f"Feature request submitted successfully! ID: {record.id}"
        "</div>"
    )


def error_fragment(message: str) -> str:
    return f'<div class="error-message">{escape(message)}</div>'


def requests_fragment(records: List[FeatureRequest]) -> str:
    if not records:
        return '<div class="feature-item"><div>No feature requests found.</div></div>'

    items = []
    for record in records:
        items.append(
            '<div class="feature-item">'
            f'<div class="feature-title">{escape(record.title)}</div>'
            '<div class="feature-meta">'
            f"ID: {record.id} | Priority: {escape(record.priority)} | "
            f"Created: {record.created_at.strftime(TIMESTAMP_FORMAT)}"
            "</div>"
            f"<div>{escape(record.description)}</div>"
            "</div>"
        )
    return "\n".join(items)
