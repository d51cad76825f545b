from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from . import models
from .errors import not_found

# purpose: the only authorization primitives for the script hierarchy
# status: active
#
# A missing row and a row owned by someone else both raise NOT_FOUND so that
# non-owners cannot probe for existence.


def resolve_script(db: Session, script_id: UUID, owner_id: str) -> models.Script:
    """Return the script if ``owner_id`` owns it, otherwise raise NOT_FOUND."""
    script = (
        db.query(models.Script)
        .filter(models.Script.id == script_id, models.Script.owner_id == owner_id)
        .first()
    )
    if not script:
        raise not_found("Script not found.")
    return script


def resolve_version(
    db: Session,
    version_id: UUID,
    script_id: UUID,
    owner_id: str,
) -> models.ScriptVersion:
    """Walk Script -> ScriptVersion, raising NOT_FOUND at the first broken link."""
    resolve_script(db, script_id, owner_id)
    version = (
        db.query(models.ScriptVersion)
        .filter(
            models.ScriptVersion.id == version_id,
            models.ScriptVersion.script_id == script_id,
        )
        .first()
    )
    if not version:
        raise not_found("Script version not found.")
    return version
