"""FastAPI application for SEO content generation (JSON API + HTMX UI)."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated, Any

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from src.api.models import (
    ArticleRequest,
    ClusterRequest,
    ErrorResponse,
    GenerateResponse,
    ToolMode,
)
from src.chains.prompts import TEMPLATE_VERSION
from src.chains.seo_generator import SEOContentGenerator
from src.config import get_settings
from src.errors import ConfigurationError, GenerationError
from src.ui.controller import InteractionController
from src.ui.state import FormState, UIState
from src.ui.utils import format_mode_label, sanitize_html, split_meta_description

settings = get_settings()

# Configure logging for Cloud Run
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Global instance (initialized on startup)
generator: SEOContentGenerator | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and cleanup resources.

    A missing API key raises ConfigurationError here so the service refuses
    to start instead of failing on the first request.
    """
    global generator

    logger.info("Initializing API resources...")
    generator = SEOContentGenerator()
    logger.info(f"Generator ready (model={settings.llm_model}, templates={TEMPLATE_VERSION})")

    yield

    logger.info("Cleaning up API resources...")


app = FastAPI(
    title="Rank Math SEO Writer API",
    description="Gemini-backed SEO article and keyword cluster generation",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure templates and static files
BASE_DIR = Path(__file__).resolve().parent.parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
templates.env.filters["mode_label"] = format_mode_label
app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")
app.state.templates = templates


def _view_context(state: UIState) -> dict[str, Any]:
    """Template context for the workspace and result partials."""
    context: dict[str, Any] = {
        "state": state,
        "modes": list(ToolMode),
        "preview_html": "",
        "meta_description": "",
    }
    if state.result is not None:
        body = state.result
        if state.mode == ToolMode.ARTICLE:
            body, context["meta_description"] = split_meta_description(state.result)
        # Preview is the only place generated markup is rendered unescaped
        context["preview_html"] = sanitize_html(body)
    return context


@app.get("/")
async def index(request: Request):
    """Render the main page with the article tool selected."""
    return templates.TemplateResponse(request, "index.html", _view_context(UIState()))


@app.get("/ui/workspace/{mode}")
async def ui_workspace(request: Request, mode: ToolMode):
    """Render the form and an empty result area for ``mode`` (mode switch).

    Swapping the whole workspace discards any result or error on screen.
    """
    return templates.TemplateResponse(
        request, "partials/workspace.html", _view_context(UIState(mode=mode))
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.post("/ui/generate")
async def ui_generate(request: Request):
    """Generate content and return the result partial for HTMX.

    Args:
        request: FastAPI request with form data (mode and the mode's fields).

    Returns:
        HTML partial with the result, an error notice, or the idle hint when
        the required field was blank.
    """
    if generator is None:
        raise HTTPException(status_code=500, detail="Generator not initialized")

    form_data = await request.form()
    try:
        mode = ToolMode(str(form_data.get("mode") or ToolMode.ARTICLE.value))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Unknown mode: {form_data.get('mode')}") from e

    controller = InteractionController(generator, UIState(mode=mode))
    controller.update_form(
        **{name: str(form_data[name]) for name in FormState.model_fields if name in form_data}
    )

    try:
        submitted = await controller.asubmit()
    except ConfigurationError as e:
        logger.error(f"Generation misconfigured: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e

    if not submitted:
        logger.info(f"UI {mode.value} submit rejected: required field blank")

    return templates.TemplateResponse(
        request, "partials/result.html", _view_context(controller.state)
    )


@app.post(
    "/generate",
    response_model=GenerateResponse,
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def generate_content(
    body: Annotated[ArticleRequest | ClusterRequest, Body(discriminator="mode")],
):
    """Generate an SEO article or keyword cluster.

    Args:
        body: Article or cluster request, selected by ``mode``.

    Returns:
        Raw generated content plus the model and template version used.
    """
    if generator is None:
        raise HTTPException(status_code=500, detail="Generator not initialized")

    try:
        content = await generator.agenerate(body)
    except ConfigurationError as e:
        logger.error(f"Generation misconfigured: {e}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=type(e).__name__, detail=str(e)).model_dump(),
        )
    except GenerationError as e:
        logger.exception("Error generating content")
        return JSONResponse(
            status_code=502,
            content=ErrorResponse(error=type(e).__name__, detail=str(e)).model_dump(),
        )

    return GenerateResponse(
        mode=ToolMode(body.mode),
        content=content,
        model=settings.llm_model,
        template_version=TEMPLATE_VERSION,
    )
