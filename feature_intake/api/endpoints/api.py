# api/endpoints/api.py

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool

from feature_intake.core.config import Settings, get_settings
from feature_intake.schemas.feature_request import APIResponse, FeatureRequestSubmission
from feature_intake.services.feature_request_service import (
    MissingFieldsError,
    submit_feature_request,
)
from feature_intake.store import RequestStore, get_store
from feature_intake.utils.relay_client import RelayError

router = APIRouter()

@router.post("/submit", response_model=APIResponse, response_model_exclude_none=True)
async def submit(
    request: Request,
    store: RequestStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    try:
        payload = await request.json()
    except (ValueError, RecursionError):
        raise HTTPException(status_code=400, detail="Invalid JSON")
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON")

    submission = FeatureRequestSubmission.from_mapping(payload)
    try:
        # el reenvío es bloqueante, fuera del event loop
        record = await run_in_threadpool(submit_feature_request, store, submission, settings)
    except MissingFieldsError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except RelayError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Feature request {exc.record.id} was saved but could not be relayed: {exc}",
        )

    return APIResponse(
        success=True,
        message="Feature request submitted successfully",
        data=record,
    )

@router.get("/requests", response_model=APIResponse, response_model_exclude_none=True)
def list_requests(store: RequestStore = Depends(get_store)):
    return APIResponse(
        success=True,
        message="Feature requests retrieved successfully",
        data=store.all(),
    )
