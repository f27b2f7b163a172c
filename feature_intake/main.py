import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from feature_intake.api.endpoints import api
from feature_intake.api.endpoints import htmx
from feature_intake.api.endpoints import pages


from fastapi.middleware.cors import CORSMiddleware
from feature_intake.core.config import Settings
from feature_intake.schemas.feature_request import APIResponse
from feature_intake.utils.fragments import error_fragment

settings = Settings()
app = FastAPI(title="Feature Request System")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pages.router, tags=["pages"])
app.include_router(api.router, prefix="/api", tags=["api"])
app.include_router(htmx.router, prefix="/htmx", tags=["htmx"])


@app.exception_handler(StarletteHTTPException)
async def envelope_exception_handler(request: Request, exc: StarletteHTTPException):
    message = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    path = request.url.path
    if path.startswith("/api/"):
        body = APIResponse(success=False, message=message).model_dump(exclude_none=True)
        return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)
    if path.startswith("/htmx/"):
        return HTMLResponse(error_fragment(message), status_code=exc.status_code, headers=exc.headers)
    return await http_exception_handler(request, exc)


def main():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger(__name__).info("Server starting on port %s", settings.port)

    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
