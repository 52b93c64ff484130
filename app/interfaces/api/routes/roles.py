"""Routes for managing roles and their permission lists."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.roles import (
    create_role as create_role_uc,
    delete_role as delete_role_uc,
    get_role as get_role_uc,
    list_roles as list_roles_uc,
    set_role_permissions as set_role_permissions_uc,
    update_role as update_role_uc,
)
from app.domain.entities import Role
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import (
    RoleCreate,
    RolePermissionsUpdate,
    RoleRead,
    RoleUpdate,
)

router = APIRouter(prefix="/roles", tags=["roles"])


def _to_read_model(role: Role) -> RoleRead:
    return RoleRead.model_validate(role)


def _ensure_role_exists(db: Session, role_id: int) -> None:
    try:
        get_role_uc(db, role_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.post("/", response_model=RoleRead, status_code=status.HTTP_201_CREATED)
def create_role(role_in: RoleCreate, db: Session = Depends(get_db)):
    """Create a role; the key must be unique and every permission must exist."""

    try:
        role = create_role_uc(
            db, role_key=role_in.role_key, permission_ids=role_in.permission_ids
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(role)


@router.get("/", response_model=list[RoleRead])
def list_roles(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return [_to_read_model(role) for role in list_roles_uc(db, skip=skip, limit=limit)]


@router.get("/{role_id}", response_model=RoleRead)
def read_role(role_id: int, db: Session = Depends(get_db)):
    try:
        role = get_role_uc(db, role_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(role)


@router.put("/{role_id}", response_model=RoleRead)
def update_role(role_id: int, role_in: RoleUpdate, db: Session = Depends(get_db)):
    _ensure_role_exists(db, role_id)
    try:
        role = update_role_uc(
            db,
            role_id=role_id,
            role_key=role_in.role_key,
            permission_ids=role_in.permission_ids,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(role)


@router.put("/{role_id}/permissions", response_model=RoleRead)
def replace_role_permissions(
    role_id: int,
    permissions_in: RolePermissionsUpdate,
    db: Session = Depends(get_db),
):
    """Replace the ordered permission list of a role."""

    _ensure_role_exists(db, role_id)
    try:
        role = set_role_permissions_uc(
            db, role_id=role_id, permission_ids=permissions_in.permission_ids
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(role)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(role_id: int, db: Session = Depends(get_db)):
    try:
        delete_role_uc(db, role_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
