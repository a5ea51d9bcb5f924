"""Quiz Router - Endpoints FastAPI sobre o AppShell."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from .errors import (
    AttemptStateError,
    DuplicateQuizError,
    GenerationInProgressError,
    InsufficientMaterialError,
    NoActiveAttemptError,
    QuizError,
    QuizNotFoundError,
    RoleError,
    SchemaError,
    ValidationError,
)
from .models.schemas import (
    AnswerRequest,
    AttemptView,
    GenerateQuizRequest,
    Quiz,
    ReviewItem,
    RoleRequest,
    ScoreResult,
    StartAttemptRequest,
)
from .shell import AppShell

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz", tags=["Quiz"])

GENERIC_GENERATION_FAILURE = "Failed to generate quiz."


# =============================================================================
# DEPENDENCY INJECTION
# =============================================================================


def get_shell(request: Request) -> AppShell:
    """Dependency para obter o AppShell da aplicacao."""
    return request.app.state.shell


def to_http_error(exc: QuizError) -> HTTPException:
    """Mapeia a taxonomia de erros para status HTTP."""
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=400, detail=exc.message)
    if isinstance(exc, RoleError):
        return HTTPException(status_code=403, detail=exc.message)
    if isinstance(exc, (QuizNotFoundError, NoActiveAttemptError)):
        return HTTPException(status_code=404, detail=exc.message)
    if isinstance(exc, (GenerationInProgressError, AttemptStateError, DuplicateQuizError)):
        return HTTPException(status_code=409, detail=exc.message)
    if isinstance(exc, InsufficientMaterialError):
        return HTTPException(status_code=422, detail=exc.message)
    if isinstance(exc, SchemaError):
        logger.error(f"Resposta fora do schema: {exc.message}")
        return HTTPException(status_code=502, detail=GENERIC_GENERATION_FAILURE)
    # TransportError, PersistenceError: repetir a chamada pode funcionar
    if exc.retryable:
        return HTTPException(status_code=503, detail=exc.message)
    logger.error(f"Erro nao mapeado: {type(exc).__name__}: {exc.message}")
    return HTTPException(status_code=500, detail=exc.message)


# =============================================================================
# QUIZZES
# =============================================================================


@router.get("/quizzes", response_model=list[Quiz])
async def list_quizzes(shell: AppShell = Depends(get_shell)):
    """Lista quizzes, mais recente primeiro."""
    return shell.list_quizzes()


@router.post("/quizzes", response_model=Quiz, status_code=201)
async def create_quiz(request: GenerateQuizRequest, shell: AppShell = Depends(get_shell)):
    """Gera um quiz a partir das notas de aula e grava no store.

    - 400: parametros invalidos (texto vazio, nenhum tipo)
    - 403: papel ativo nao e ADMIN
    - 409: ja existe uma geracao pendente, ou a resposta ficou obsoleta
    - 422: material insuficiente
    - 502: resposta fora do formato esperado
    - 503: servico indisponivel (pode tentar de novo)
    """
    try:
        quiz = await shell.create_quiz(request)
    except QuizError as e:
        raise to_http_error(e) from e

    if quiz is None:
        raise HTTPException(
            status_code=409,
            detail="The generation request was abandoned and its result was discarded.",
        )
    return quiz


@router.delete("/quizzes/{quiz_id}", status_code=204)
async def delete_quiz(quiz_id: str, shell: AppShell = Depends(get_shell)):
    """Remove um quiz."""
    try:
        await shell.delete_quiz(quiz_id)
    except QuizError as e:
        raise to_http_error(e) from e
    return Response(status_code=204)


# =============================================================================
# ROLE
# =============================================================================


@router.get("/role")
async def get_role(shell: AppShell = Depends(get_shell)):
    return {"role": shell.role.value, "generating": shell.authoring.is_generating}


@router.put("/role")
async def set_role(request: RoleRequest, shell: AppShell = Depends(get_shell)):
    """Troca entre STUDENT e ADMIN."""
    shell.switch_role(request.role)
    return {"role": shell.role.value, "generating": shell.authoring.is_generating}


# =============================================================================
# ATTEMPT
# =============================================================================


@router.post("/attempt", response_model=AttemptView, status_code=201)
async def start_attempt(request: StartAttemptRequest, shell: AppShell = Depends(get_shell)):
    """Inicia uma tentativa nova sobre o quiz."""
    try:
        return shell.start_attempt(request.quiz_id).view()
    except QuizError as e:
        raise to_http_error(e) from e


@router.get("/attempt", response_model=AttemptView)
async def get_attempt(shell: AppShell = Depends(get_shell)):
    try:
        return shell.require_attempt().view()
    except QuizError as e:
        raise to_http_error(e) from e


@router.delete("/attempt", status_code=204)
async def exit_attempt(shell: AppShell = Depends(get_shell)):
    """Volta ao dashboard."""
    shell.exit_attempt()
    return Response(status_code=204)


@router.post("/attempt/answer", response_model=AttemptView)
async def submit_answer(request: AnswerRequest, shell: AppShell = Depends(get_shell)):
    try:
        return shell.submit_answer(request.value).view()
    except QuizError as e:
        raise to_http_error(e) from e


@router.post("/attempt/advance", response_model=AttemptView)
async def advance(shell: AppShell = Depends(get_shell)):
    """Proxima questao; na ultima, submete a tentativa."""
    try:
        return shell.advance().view()
    except QuizError as e:
        raise to_http_error(e) from e


@router.post("/attempt/retreat", response_model=AttemptView)
async def retreat(shell: AppShell = Depends(get_shell)):
    try:
        return shell.retreat().view()
    except QuizError as e:
        raise to_http_error(e) from e


@router.post("/attempt/restart", response_model=AttemptView)
async def restart(shell: AppShell = Depends(get_shell)):
    try:
        return shell.restart().view()
    except QuizError as e:
        raise to_http_error(e) from e


@router.get("/attempt/score", response_model=ScoreResult)
async def get_score(shell: AppShell = Depends(get_shell)):
    """Resultado final (apenas apos submissao)."""
    try:
        return shell.score()
    except QuizError as e:
        raise to_http_error(e) from e


@router.get("/attempt/review", response_model=list[ReviewItem])
async def get_review(shell: AppShell = Depends(get_shell)):
    """Revisao questao a questao (apenas apos submissao)."""
    try:
        return shell.review_data()
    except QuizError as e:
        raise to_http_error(e) from e
