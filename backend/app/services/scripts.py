"""Action handlers for scripts, their versions and their elements."""

# purpose: authenticate, walk the ownership chain, apply one storage operation, return an envelope
# status: active
# depends_on: backend.app.ownership, backend.app.schemas
#
# Every handler takes the caller identity as its first argument. Handlers do
# not wrap the read-then-write pair in a lock; concurrent patches to the same
# row are last-write-wins.

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from .. import models
from ..auth import Identity, require_user
from ..errors import EMPTY_PATCH_MESSAGE, not_found, validation_error
from ..ownership import resolve_script, resolve_version
from ..schemas import (
    ActionAck,
    PatchModel,
    ScriptCreate,
    ScriptData,
    ScriptElementCreate,
    ScriptElementData,
    ScriptElementListData,
    ScriptElementListResult,
    ScriptElementOut,
    ScriptElementResult,
    ScriptElementUpdate,
    ScriptListData,
    ScriptListResult,
    ScriptOut,
    ScriptResult,
    ScriptUpdate,
    ScriptVersionCreate,
    ScriptVersionData,
    ScriptVersionListData,
    ScriptVersionListResult,
    ScriptVersionOut,
    ScriptVersionResult,
    ScriptVersionUpdate,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_changes(patch: PatchModel) -> dict:
    changes = patch.changes()
    if not changes:
        raise validation_error(EMPTY_PATCH_MESSAGE)
    return changes


def _apply(record, changes: dict) -> None:
    for key, value in changes.items():
        setattr(record, key, value)


def _script_result(script: models.Script) -> ScriptResult:
    return ScriptResult(data=ScriptData(script=ScriptOut.model_validate(script)))


def _version_result(version: models.ScriptVersion) -> ScriptVersionResult:
    return ScriptVersionResult(
        data=ScriptVersionData(version=ScriptVersionOut.model_validate(version))
    )


def _element_result(element: models.ScriptElement) -> ScriptElementResult:
    return ScriptElementResult(
        data=ScriptElementData(element=ScriptElementOut.model_validate(element))
    )


# Scripts


def create_script(identity: Optional[Identity], db: Session, payload: ScriptCreate) -> ScriptResult:
    user = require_user(identity)
    now = _utcnow()
    script = models.Script(
        **payload.model_dump(),
        owner_id=user.user_id,
        created_at=now,
        updated_at=now,
    )
    db.add(script)
    db.commit()
    db.refresh(script)
    logger.info("Created script %s for %s", script.id, user.user_id)
    return _script_result(script)


def update_script(
    identity: Optional[Identity],
    db: Session,
    script_id: UUID,
    patch: ScriptUpdate,
) -> ScriptResult:
    user = require_user(identity)
    changes = _require_changes(patch)
    script = resolve_script(db, script_id, user.user_id)
    _apply(script, changes)
    script.updated_at = _utcnow()
    db.commit()
    db.refresh(script)
    logger.info("Updated script %s fields=%s", script.id, sorted(changes))
    return _script_result(script)


def list_scripts(identity: Optional[Identity], db: Session) -> ScriptListResult:
    user = require_user(identity)
    scripts = db.query(models.Script).filter(models.Script.owner_id == user.user_id).all()
    items = [ScriptOut.model_validate(s) for s in scripts]
    return ScriptListResult(data=ScriptListData(items=items, total=len(items)))


# Versions


def create_script_version(
    identity: Optional[Identity],
    db: Session,
    script_id: UUID,
    payload: ScriptVersionCreate,
) -> ScriptVersionResult:
    user = require_user(identity)
    resolve_script(db, script_id, user.user_id)
    version = models.ScriptVersion(
        **payload.model_dump(),
        script_id=script_id,
        created_at=_utcnow(),
    )
    db.add(version)
    db.commit()
    db.refresh(version)
    logger.info("Created version %s of script %s", version.id, script_id)
    return _version_result(version)


def update_script_version(
    identity: Optional[Identity],
    db: Session,
    version_id: UUID,
    script_id: UUID,
    patch: ScriptVersionUpdate,
) -> ScriptVersionResult:
    user = require_user(identity)
    changes = _require_changes(patch)
    version = resolve_version(db, version_id, script_id, user.user_id)
    _apply(version, changes)
    db.commit()
    db.refresh(version)
    logger.info("Updated version %s fields=%s", version.id, sorted(changes))
    return _version_result(version)


def delete_script_version(
    identity: Optional[Identity],
    db: Session,
    version_id: UUID,
    script_id: UUID,
) -> ActionAck:
    user = require_user(identity)
    resolve_version(db, version_id, script_id, user.user_id)
    # elements of the version are not removed here
    deleted = (
        db.query(models.ScriptVersion)
        .filter(models.ScriptVersion.id == version_id)
        .delete(synchronize_session="fetch")
    )
    if deleted == 0:
        db.rollback()
        raise not_found("Script version not found.")
    db.commit()
    logger.info("Deleted version %s of script %s", version_id, script_id)
    return ActionAck()


def list_script_versions(
    identity: Optional[Identity],
    db: Session,
    script_id: UUID,
    preferred_only: bool = False,
) -> ScriptVersionListResult:
    user = require_user(identity)
    resolve_script(db, script_id, user.user_id)
    query = db.query(models.ScriptVersion).filter(models.ScriptVersion.script_id == script_id)
    if preferred_only:
        query = query.filter(models.ScriptVersion.is_preferred.is_(True))
    items = [ScriptVersionOut.model_validate(v) for v in query.all()]
    return ScriptVersionListResult(data=ScriptVersionListData(items=items, total=len(items)))


# Elements


def create_script_element(
    identity: Optional[Identity],
    db: Session,
    script_id: UUID,
    version_id: UUID,
    payload: ScriptElementCreate,
) -> ScriptElementResult:
    user = require_user(identity)
    resolve_version(db, version_id, script_id, user.user_id)
    element = models.ScriptElement(
        **payload.model_dump(),
        script_version_id=version_id,
        created_at=_utcnow(),
    )
    db.add(element)
    db.commit()
    db.refresh(element)
    logger.info("Created element %s in version %s", element.id, version_id)
    return _element_result(element)


def _element_query(db: Session, element_id: UUID, version_id: UUID):
    return db.query(models.ScriptElement).filter(
        models.ScriptElement.id == element_id,
        models.ScriptElement.script_version_id == version_id,
    )


def update_script_element(
    identity: Optional[Identity],
    db: Session,
    element_id: UUID,
    script_id: UUID,
    version_id: UUID,
    patch: ScriptElementUpdate,
) -> ScriptElementResult:
    user = require_user(identity)
    changes = _require_changes(patch)
    resolve_version(db, version_id, script_id, user.user_id)
    element = _element_query(db, element_id, version_id).first()
    if not element:
        raise not_found("Script element not found.")
    _apply(element, changes)
    db.commit()
    db.refresh(element)
    logger.info("Updated element %s fields=%s", element.id, sorted(changes))
    return _element_result(element)


def delete_script_element(
    identity: Optional[Identity],
    db: Session,
    element_id: UUID,
    script_id: UUID,
    version_id: UUID,
) -> ActionAck:
    user = require_user(identity)
    resolve_version(db, version_id, script_id, user.user_id)
    deleted = _element_query(db, element_id, version_id).delete(synchronize_session="fetch")
    if deleted == 0:
        db.rollback()
        raise not_found("Script element not found.")
    db.commit()
    logger.info("Deleted element %s from version %s", element_id, version_id)
    return ActionAck()


def list_script_elements(
    identity: Optional[Identity],
    db: Session,
    script_id: UUID,
    version_id: UUID,
) -> ScriptElementListResult:
    user = require_user(identity)
    resolve_version(db, version_id, script_id, user.user_id)
    # stored order only; callers sort by order_index
    elements = (
        db.query(models.ScriptElement)
        .filter(models.ScriptElement.script_version_id == version_id)
        .all()
    )
    items = [ScriptElementOut.model_validate(e) for e in elements]
    return ScriptElementListResult(data=ScriptElementListData(items=items, total=len(items)))
