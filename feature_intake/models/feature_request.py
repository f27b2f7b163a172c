from typing import List
from datetime import datetime, timezone
from pydantic import BaseModel, Field


class FeatureRequest(BaseModel):
    id: int
    title: str
    description: str
    acceptance_criteria: str
    priority: str
    target_timeline: str = ""
    affected_components: List[str] = Field(default_factory=list)
    example_usage: str = ""
    technical_constraints: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: str = "submitted"    # no cambia nunca en este servicio

    model_config = {"frozen": True}
