import logging
from typing import List, Optional

from feature_intake.core.config import Settings
from feature_intake.models.feature_request import FeatureRequest
from feature_intake.schemas.feature_request import FeatureRequestSubmission
from feature_intake.store import RequestStore
from feature_intake.utils.relay_client import relay_feature_request

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all required fields"


class MissingFieldsError(ValueError):
    def __init__(self, fields: List[str]):
        super().__init__(MISSING_FIELDS_MESSAGE)
        self.fields = fields


def parse_components(raw: Optional[str]) -> List[str]:
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


def submit_feature_request(
    store: RequestStore,
    submission: FeatureRequestSubmission,
    settings: Settings,
) -> FeatureRequest:
    """Valida, guarda y, si hay endpoint configurado, reenvía la solicitud.

    El registro queda guardado aunque el reenvío falle; en ese caso se
    propaga RelayError con el registro adjunto.
    """
    missing = submission.missing_fields()
    if missing:
        logger.warning("Feature request rejected, missing fields: %s", ", ".join(missing))
        raise MissingFieldsError(missing)

    components = parse_components(submission.affected_components)
    record = store.add(
        lambda new_id: FeatureRequest(
            id=new_id,
            title=submission.title,
            description=submission.description,
            acceptance_criteria=submission.acceptance_criteria,
            priority=submission.priority,
            target_timeline=submission.target_timeline,
            affected_components=components,
            example_usage=submission.example_usage,
            technical_constraints=submission.technical_constraints,
        )
    )
    logger.info("Feature request %s stored: %s", record.id, record.title)

    if not settings.relay_enabled:
        logger.debug("Relay not configured, skipping feature request %s", record.id)
        return record

    relay_feature_request(record, settings)
    return record
