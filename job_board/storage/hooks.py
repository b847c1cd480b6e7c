"""Session hooks that regenerate resumes when candidate profiles are written."""

import logging
import weakref
from typing import Optional

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from job_board.models import FIELD_ATTRIBUTES, CandidateProfile
from job_board.profile.records import DictRecord
from job_board.resume.composer import generate_and_save_resume
from job_board.resume.pdf_renderer import PdfRenderer
from job_board.resume.redactor import REDACTION_PLACEHOLDER

logger = logging.getLogger("job_board.storage")

# Registered before_flush listener per target; entries go away with the target.
_listeners: "weakref.WeakKeyDictionary" = weakref.WeakKeyDictionary()


class OrmProfileRecord:
    """Record view over a CandidateProfile instance inside a flush."""

    def __init__(self, profile: CandidateProfile):
        self.profile = profile

    def get(self, field: str):
        return self.profile.get(field)

    def set(self, field: str, value) -> None:
        setattr(self.profile, FIELD_ATTRIBUTES[field], value)

    def original(self) -> Optional[DictRecord]:
        """Persisted values before the pending write; None for a new profile."""
        state = inspect(self.profile)
        if not state.persistent:
            return None
        values = {}
        for field, attr in FIELD_ATTRIBUTES.items():
            attr_state = state.attrs[attr]
            history = attr_state.history
            if history.has_changes():
                # deleted is empty when the prior value was never loaded
                values[field] = history.deleted[0] if history.deleted else None
            else:
                values[field] = attr_state.value
        return DictRecord(values)


def register_resume_hooks(
    target=Session,
    renderer: Optional[PdfRenderer] = None,
    placeholder: str = REDACTION_PLACEHOLDER,
) -> None:
    """Regenerate resumes for created/updated profiles on every flush of target.

    target is anything SQLAlchemy accepts for session events: the Session
    class, a sessionmaker, or a single session. Registering again for the same
    target replaces the previous hook.
    """
    remove_resume_hooks(target)

    def compose_profiles(session, flush_context, instances):
        for obj in list(session.new) + list(session.dirty):
            if not isinstance(obj, CandidateProfile) or obj in session.deleted:
                continue
            try:
                generate_and_save_resume(OrmProfileRecord(obj), renderer=renderer, placeholder=placeholder)
            except Exception:
                # The profile write itself must still go through.
                logger.exception("Resume generation failed for profile %s", obj.id)

    event.listen(target, "before_flush", compose_profiles)
    _listeners[target] = compose_profiles
    logger.debug("Resume hooks registered on %r", target)


def remove_resume_hooks(target=Session) -> None:
    listener = _listeners.pop(target, None)
    if listener is not None:
        event.remove(target, "before_flush", listener)
