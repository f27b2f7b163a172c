from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse

from feature_intake.core.config import Settings, get_settings
from feature_intake.schemas.feature_request import FeatureRequestSubmission
from feature_intake.services.feature_request_service import (
    MissingFieldsError,
    submit_feature_request,
)
from feature_intake.store import RequestStore, get_store
from feature_intake.utils.fragments import requests_fragment, success_fragment
from feature_intake.utils.relay_client import RelayError

router = APIRouter()

@router.post("/submit", response_class=HTMLResponse)
def submit_form(
    title: str = Form(""),
    description: str = Form(""),
    acceptance_criteria: str = Form(""),
    priority: str = Form(""),
    target_timeline: str = Form(""),
    affected_components: str = Form(""),
    example_usage: str = Form(""),
    technical_constraints: str = Form(""),
    store: RequestStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    submission = FeatureRequestSubmission(
        title=title,
        description=description,
        acceptance_criteria=acceptance_criteria,
        priority=priority,
        target_timeline=target_timeline,
        affected_components=affected_components,
        example_usage=example_usage,
        technical_constraints=technical_constraints,
    )
    try:
        record = submit_feature_request(store, submission, settings)
    except MissingFieldsError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except RelayError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Feature request {exc.record.id} was saved but could not be relayed",
        )
    return success_fragment(record)

@router.get("/requests", response_class=HTMLResponse)
def list_requests(store: RequestStore = Depends(get_store)):
    return requests_fragment(store.all())

@router.get("/form", response_class=HTMLResponse)
def reset_form():
    return "<div>Form reset successfully!</div>"
