"""Shared FastAPI dependencies — profile store per request."""

from collections.abc import Generator

from fastapi import Request

from job_board.storage.profile_store import ProfileStore


def get_store(request: Request) -> Generator[ProfileStore, None, None]:
    state = request.app.state
    store = ProfileStore(
        state.session_factory,
        renderer=state.renderer,
        placeholder=state.config.resume.placeholder,
        register_hooks=False,
    )
    try:
        yield store
    finally:
        store.close()
