"""Server-rendered comparison page."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from bias_radar.app.core.config import get_settings
from bias_radar.app.core.logging import get_logger
from bias_radar.app.services.comparison_service import (
    AnalysisError,
    AnalysisInProgressError,
    ArticleValidationError,
    ComparisonService,
    ComparisonSession,
    get_comparison_service,
)
from bias_radar.app.services.session_store import SessionStore, get_session_store
from bias_radar.app.web import TEMPLATES_DIR
from bias_radar.app.web.presenters import build_page_context

logger = get_logger(__name__)

router = APIRouter(tags=["web"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _render(
    request: Request,
    session_id: str,
    session: ComparisonSession,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    settings = get_settings()
    context = build_page_context(
        session,
        settings=settings,
        notifications=session.drain_notifications(),
    )
    response = templates.TemplateResponse(
        request, "index.html", context, status_code=status_code
    )
    response.set_cookie(settings.session_cookie_name, session_id, httponly=True, samesite="lax")
    return response


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    store: SessionStore = Depends(get_session_store),
) -> HTMLResponse:
    session_id, session = store.get_or_create(
        request.cookies.get(get_settings().session_cookie_name)
    )
    return _render(request, session_id, session)


@router.post("/analyze", response_class=HTMLResponse, name="analyze_articles")
async def analyze_articles(
    request: Request,
    article1: str = Form(""),
    article2: str = Form(""),
    store: SessionStore = Depends(get_session_store),
    service: ComparisonService = Depends(get_comparison_service),
) -> HTMLResponse:
    session_id, session = store.get_or_create(
        request.cookies.get(get_settings().session_cookie_name)
    )

    status_code = status.HTTP_200_OK
    try:
        await service.run_analysis(session, article1, article2)
    except ArticleValidationError:
        status_code = status.HTTP_400_BAD_REQUEST
    except AnalysisInProgressError:
        status_code = status.HTTP_409_CONFLICT
    except AnalysisError:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return _render(request, session_id, session, status_code=status_code)
