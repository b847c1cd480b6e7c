"""Candidate profile routes — create/update profiles, fetch generated resumes."""

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from job_board.storage.profile_store import ProfileNotFoundError, ProfileStore

from .dependencies import get_store

router = APIRouter(prefix="/profiles")


def _load(store: ProfileStore, profile_id: int):
    try:
        return store.get_profile(profile_id)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _write(action, *args):
    try:
        return action(*args)
    except ProfileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("", status_code=201)
def create_profile(fields: dict = Body(...), store: ProfileStore = Depends(get_store)):
    profile = _write(store.create_profile, fields)
    return profile.to_dict()


@router.get("/{profile_id}")
def get_profile(profile_id: int, store: ProfileStore = Depends(get_store)):
    return _load(store, profile_id).to_dict()


@router.patch("/{profile_id}")
def update_profile(profile_id: int, fields: dict = Body(...), store: ProfileStore = Depends(get_store)):
    profile = _write(store.update_profile, profile_id, fields)
    return profile.to_dict()


@router.get("/{profile_id}/resume")
def get_resume(profile_id: int, redacted: bool = False, store: ProfileStore = Depends(get_store)):
    profile = _load(store, profile_id)
    markdown = profile.resume_generated_redacted if redacted else profile.resume_generated
    if not markdown:
        raise HTTPException(status_code=404, detail="No resume generated for this profile")
    return PlainTextResponse(markdown, media_type="text/markdown")


@router.get("/{profile_id}/resume.pdf")
def get_resume_pdf(profile_id: int, request: Request, store: ProfileStore = Depends(get_store)):
    profile = _load(store, profile_id)
    if not profile.resume_generated_pdf:
        raise HTTPException(status_code=404, detail="No PDF resume for this profile")
    filename = request.app.state.config.resume.pdf.filename
    return Response(
        profile.resume_generated_pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{profile_id}/resume/regenerate")
def regenerate_resume(profile_id: int, store: ProfileStore = Depends(get_store)):
    written = _write(store.regenerate_resume, profile_id)
    return {"id": profile_id, "regenerated": written}
