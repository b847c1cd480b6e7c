"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI

from job_board.config import AppConfig
from job_board.models import make_session_factory
from job_board.resume.pdf_renderer import create_renderer
from job_board.storage.hooks import register_resume_hooks

from .profile import router as profile_router

logger = logging.getLogger("job_board.web")


def create_app(config: Optional[AppConfig] = None, session_factory=None) -> FastAPI:
    config = config or AppConfig()
    app = FastAPI(title="Job Board")

    app.state.config = config
    app.state.session_factory = session_factory or make_session_factory(config.database.url, config.database.echo)
    app.state.renderer = create_renderer(config.resume.pdf)
    register_resume_hooks(
        app.state.session_factory,
        renderer=app.state.renderer,
        placeholder=config.resume.placeholder,
    )

    app.include_router(profile_router)

    @app.get("/health")
    def health():
        return {"status": "ok", "pdf": app.state.renderer is not None}

    logger.info("Job board API ready (PDF rendering %s)", "on" if app.state.renderer else "off")
    return app
