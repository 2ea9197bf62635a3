# survey_backend/routers/dependencies.py

from fastapi import Request

from survey_backend.services.response_store import ResponseStore


def get_store(request: Request) -> ResponseStore:
    """The store is built once in create_app() and hung off app.state."""
    return request.app.state.store
