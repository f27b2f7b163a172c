from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse

from feature_intake.utils.page_loader import load_page

router = APIRouter()

@router.get("/", response_class=HTMLResponse)
def home():
    return load_page("index.html")

@router.get("/health", response_class=PlainTextResponse)
def health():
    # solo liveness, no se consulta el relay
    return "OK"
