"""Script, version and element API routes."""

# purpose: expose the script actions over HTTP, one route per logical operation
# status: active
# depends_on: backend.app.services.scripts, backend.app.schemas

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from .. import schemas
from ..auth import Identity, get_current_user
from ..database import get_db
from ..services import scripts

router = APIRouter(prefix="/api/scripts", tags=["scripts"])

VERSION_PATH = "/{script_id}/versions/{version_id}"
ELEMENT_PATH = VERSION_PATH + "/elements"


@router.post(
    "",
    response_model=schemas.ScriptResult,
    status_code=status.HTTP_201_CREATED,
    operation_id="createScript",
)
def create_script(
    payload: schemas.ScriptCreate,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptResult:
    return scripts.create_script(user, db, payload)


@router.patch("/{script_id}", response_model=schemas.ScriptResult, operation_id="updateScript")
def update_script(
    script_id: UUID,
    patch: schemas.ScriptUpdate,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptResult:
    return scripts.update_script(user, db, script_id, patch)


@router.get("", response_model=schemas.ScriptListResult, operation_id="listScripts")
def list_scripts(
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptListResult:
    return scripts.list_scripts(user, db)


@router.post(
    "/{script_id}/versions",
    response_model=schemas.ScriptVersionResult,
    status_code=status.HTTP_201_CREATED,
    operation_id="createScriptVersion",
)
def create_script_version(
    script_id: UUID,
    payload: schemas.ScriptVersionCreate,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptVersionResult:
    return scripts.create_script_version(user, db, script_id, payload)


@router.patch(
    VERSION_PATH,
    response_model=schemas.ScriptVersionResult,
    operation_id="updateScriptVersion",
)
def update_script_version(
    script_id: UUID,
    version_id: UUID,
    patch: schemas.ScriptVersionUpdate,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptVersionResult:
    return scripts.update_script_version(user, db, version_id, script_id, patch)


@router.delete(VERSION_PATH, response_model=schemas.ActionAck, operation_id="deleteScriptVersion")
def delete_script_version(
    script_id: UUID,
    version_id: UUID,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ActionAck:
    return scripts.delete_script_version(user, db, version_id, script_id)


@router.get(
    "/{script_id}/versions",
    response_model=schemas.ScriptVersionListResult,
    operation_id="listScriptVersions",
)
def list_script_versions(
    script_id: UUID,
    preferred_only: bool = Query(default=False),
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptVersionListResult:
    return scripts.list_script_versions(user, db, script_id, preferred_only=preferred_only)


@router.post(
    ELEMENT_PATH,
    response_model=schemas.ScriptElementResult,
    status_code=status.HTTP_201_CREATED,
    operation_id="createScriptElement",
)
def create_script_element(
    script_id: UUID,
    version_id: UUID,
    payload: schemas.ScriptElementCreate,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptElementResult:
    return scripts.create_script_element(user, db, script_id, version_id, payload)


@router.patch(
    ELEMENT_PATH + "/{element_id}",
    response_model=schemas.ScriptElementResult,
    operation_id="updateScriptElement",
)
def update_script_element(
    script_id: UUID,
    version_id: UUID,
    element_id: UUID,
    patch: schemas.ScriptElementUpdate,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptElementResult:
    return scripts.update_script_element(user, db, element_id, script_id, version_id, patch)


@router.delete(
    ELEMENT_PATH + "/{element_id}",
    response_model=schemas.ActionAck,
    operation_id="deleteScriptElement",
)
def delete_script_element(
    script_id: UUID,
    version_id: UUID,
    element_id: UUID,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ActionAck:
    return scripts.delete_script_element(user, db, element_id, script_id, version_id)


@router.get(
    ELEMENT_PATH,
    response_model=schemas.ScriptElementListResult,
    operation_id="listScriptElements",
)
def list_script_elements(
    script_id: UUID,
    version_id: UUID,
    user: Identity = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> schemas.ScriptElementListResult:
    return scripts.list_script_elements(user, db, script_id, version_id)
