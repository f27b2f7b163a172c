# schemas/feature_request.py

from pydantic import BaseModel, field_validator
from typing import Any, Mapping, Optional

TEXT_FIELDS = (
    "title",
    "description",
    "acceptance_criteria",
    "priority",
    "target_timeline",
    "affected_components",
    "example_usage",
    "technical_constraints",
)
REQUIRED_FIELDS = ("title", "description", "acceptance_criteria", "priority")


class FeatureRequestSubmission(BaseModel):
    title: str = ""
    description: str = ""
    acceptance_criteria: str = ""
    priority: str = ""
    target_timeline: str = ""
    affected_components: str = ""
    example_usage: str = ""
    technical_constraints: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def only_strings(cls, value):
        # valores no textuales del JSON se tratan como ausentes
        return value if isinstance(value, str) else ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FeatureRequestSubmission":
        return cls(**{key: data[key] for key in TEXT_FIELDS if key in data})

    def missing_fields(self):
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]


class APIResponse(BaseModel):
    success: bool
    message: str
    data: Optional[Any] = None
