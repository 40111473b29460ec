from fastapi import FastAPI, HTTPException, Depends, status
from fastapi.responses import Response

from .dependencies import get_practice_service
from ..logging_config import configure_logging
from ..services.exceptions import SessionNotFoundError
from ..services.practice import PracticeService
from .schemas import (
    ActionResponse,
    CreateSessionRequest,
    SelectSkillRequest,
    SessionResponse,
    UserMessage,
)

configure_logging()

app = FastAPI(title="Case Interview Practice")

# --- Endpoints ---

@app.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_session(
    request: CreateSessionRequest | None = None,
    service: PracticeService = Depends(get_practice_service)
):
    """Starts a new session on the requested (or default) skill."""
    session_id, state = await service.create_session(request.skill if request else None)
    return SessionResponse(session_id=session_id, state=state)


@app.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: str,
    service: PracticeService = Depends(get_practice_service)
):
    try:
        session = service.get_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionResponse(session_id=session_id, state=session.state)


@app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: str,
    service: PracticeService = Depends(get_practice_service)
):
    """
    Deletes a session. Returns 204 No Content on success.
    """
    success = service.delete_session(session_id)
    if not success:
        raise HTTPException(status_code=404, detail="Session not found")

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/sessions/{session_id}/skill", response_model=SessionResponse)
def select_skill(
    session_id: str,
    request: SelectSkillRequest,
    service: PracticeService = Depends(get_practice_service)
):
    try:
        state = service.select_skill(session_id, request.skill)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionResponse(session_id=session_id, state=state)


@app.post("/sessions/{session_id}/turns", response_model=ActionResponse)
async def submit_turn(
    session_id: str,
    message: UserMessage,
    service: PracticeService = Depends(get_practice_service)
):
    try:
        accepted, state = await service.submit_turn(session_id, message.text)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ActionResponse(session_id=session_id, accepted=accepted, state=state)


@app.post("/sessions/{session_id}/completion", response_model=ActionResponse)
def invoke_completion_action(
    session_id: str,
    service: PracticeService = Depends(get_practice_service)
):
    try:
        accepted, state = service.invoke_completion_action(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ActionResponse(session_id=session_id, accepted=accepted, state=state)


@app.post("/sessions/{session_id}/feedback", response_model=SessionResponse)
async def request_feedback(
    session_id: str,
    service: PracticeService = Depends(get_practice_service)
):
    try:
        state = await service.request_feedback(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionResponse(session_id=session_id, state=state)


@app.post("/sessions/{session_id}/reload", response_model=SessionResponse)
async def reload_corpus(
    session_id: str,
    service: PracticeService = Depends(get_practice_service)
):
    """Re-fetches the prompt corpus and restarts the session's current skill."""
    try:
        state = await service.reload_corpus(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionResponse(session_id=session_id, state=state)
