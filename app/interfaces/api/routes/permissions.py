"""Routes for managing permissions."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.permissions import (
    create_permission as create_permission_uc,
    delete_permission as delete_permission_uc,
    get_permission as get_permission_uc,
    list_permissions as list_permissions_uc,
    update_permission as update_permission_uc,
)
from app.infrastructure.database import get_db
from app.interfaces.api.schemas import PermissionCreate, PermissionRead, PermissionUpdate

router = APIRouter(prefix="/permissions", tags=["permissions"])


@router.post("/", response_model=PermissionRead, status_code=status.HTTP_201_CREATED)
def create_permission(permission_in: PermissionCreate, db: Session = Depends(get_db)):
    permission = create_permission_uc(db, permission=permission_in.permission)
    return PermissionRead.model_validate(permission)


@router.get("/", response_model=list[PermissionRead])
def list_permissions(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return [
        PermissionRead.model_validate(permission)
        for permission in list_permissions_uc(db, skip=skip, limit=limit)
    ]


@router.get("/{permission_id}", response_model=PermissionRead)
def read_permission(permission_id: int, db: Session = Depends(get_db)):
    try:
        permission = get_permission_uc(db, permission_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PermissionRead.model_validate(permission)


@router.put("/{permission_id}", response_model=PermissionRead)
def update_permission(
    permission_id: int,
    permission_in: PermissionUpdate,
    db: Session = Depends(get_db),
):
    try:
        permission = update_permission_uc(
            db, permission_id=permission_id, permission=permission_in.permission
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PermissionRead.model_validate(permission)


@router.delete("/{permission_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_permission(permission_id: int, db: Session = Depends(get_db)):
    """Delete a permission; roles listing it drop the entry."""

    try:
        delete_permission_uc(db, permission_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
