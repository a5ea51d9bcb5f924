"""
UniQuest Server - Lecture quiz authoring and delivery

FastAPI server with:
- Quiz generation from lecture notes (Claude Agent SDK)
- Local durable quiz store
- Quiz-taking engine (navigation, scoring, review)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from quiz.config import QuizConfig
from quiz.router import router as quiz_router
from quiz.shell import AppShell, build_shell

logger = logging.getLogger(__name__)


# =============================================================================
# FASTAPI APP
# =============================================================================


def create_app(config: QuizConfig | None = None, shell: AppShell | None = None) -> FastAPI:
    """Cria a aplicacao.

    Args:
        config: Configuracao (padrao: variaveis de ambiente)
        shell: Shell pronto (testes); padrao: ``build_shell(config)``
    """
    config = config or QuizConfig.from_env()
    shell = shell or build_shell(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage app lifecycle."""
        logger.info("Starting UniQuest...")
        await shell.startup()
        yield
        shell.authoring.abandon()
        logger.info("UniQuest stopped")

    app = FastAPI(
        title="UniQuest",
        description="Lecture-based quiz generation and delivery",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.shell = shell
    app.state.config = config

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(quiz_router)

    @app.get("/health")
    async def health(request: Request):
        """Health check com o estado do store."""
        current: AppShell = request.app.state.shell
        return {
            "status": "healthy",
            "quizzes": len(current.store),
            "role": current.role.value,
            "storage_warning": current.store.warning,
            "persist_error": current.store.last_persist_error,
        }

    return app


if __name__ == "__main__":
    import uvicorn

    config = QuizConfig.from_env()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(config), host="0.0.0.0", port=8001)
