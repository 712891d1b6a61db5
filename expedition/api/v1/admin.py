from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response

from expedition.api.v1.schemas import (
    DashboardResponseSchema,
    LoginRequestSchema,
    LoginResponseSchema,
    RegistrationSchema,
    StatusUpdateRequestSchema,
)
from expedition.application.exceptions import (
    AdminAuthError,
    ConfirmationRequiredError,
    UnsupportedOperationError,
)
from expedition.application.use_cases.admin_auth import AdminAuthUseCase
from expedition.application.use_cases.admin_dashboard import AdminDashboardUseCase
from expedition.wiring.dependencies import get_admin_auth, get_admin_dashboard_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_admin(
    authorization: str | None = Header(None),
    auth: AdminAuthUseCase = Depends(get_admin_auth),
) -> str:
    token = _bearer_token(authorization)
    if not auth.is_authenticated(token):
        raise HTTPException(
            status_code=401,
            detail="Admin authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return token


@router.post("/login", response_model=LoginResponseSchema)
def login(req: LoginRequestSchema, auth: AdminAuthUseCase = Depends(get_admin_auth)):
    try:
        token = auth.login(req.password)
    except AdminAuthError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return LoginResponseSchema(token=token, expires_in=int(auth.ttl_seconds))


@router.post("/logout", status_code=204)
def logout(token: str = Depends(require_admin), auth: AdminAuthUseCase = Depends(get_admin_auth)) -> Response:
    auth.logout(token)
    return Response(status_code=204)


@router.get("/registrations", response_model=DashboardResponseSchema)
def list_registrations(
    search: str | None = Query(None),
    _: str = Depends(require_admin),
    uc: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
):
    view = uc.overview(search)
    return DashboardResponseSchema(
        registrations=[RegistrationSchema.from_entity(r) for r in view.registrations],
        total_count=view.total_count,
        filtered_count=view.filtered_count,
        revenue=view.revenue,
        supports_snapshot=uc.supports_snapshot,
    )


@router.patch("/registrations/{registration_id}/status", status_code=204)
def update_status(
    registration_id: str,
    req: StatusUpdateRequestSchema,
    _: str = Depends(require_admin),
    uc: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> Response:
    uc.update_status(registration_id, req.status)
    return Response(status_code=204)


@router.delete("/registrations/{registration_id}", status_code=204)
def delete_registration(
    registration_id: str,
    confirm: bool = Query(False),
    _: str = Depends(require_admin),
    uc: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> Response:
    try:
        uc.delete(registration_id, confirmed=confirm)
    except ConfirmationRequiredError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return Response(status_code=204)


@router.get("/export.csv")
def export_csv(
    search: str | None = Query(None),
    _: str = Depends(require_admin),
    uc: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> Response:
    return Response(
        content=uc.export_csv(search),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="registrations.csv"'},
    )


@router.get("/database")
def download_database(
    _: str = Depends(require_admin),
    uc: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> Response:
    try:
        filename, media_type, payload = uc.download_snapshot()
    except UnsupportedOperationError as e:
        raise HTTPException(status_code=404, detail=f"operation not supported by backend: {e}")
    return Response(
        content=payload,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/wipe", status_code=204)
def wipe_database(
    confirm: bool = Query(False),
    _: str = Depends(require_admin),
    uc: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
) -> Response:
    try:
        uc.wipe(confirmed=confirm)
    except UnsupportedOperationError as e:
        raise HTTPException(status_code=404, detail=f"operation not supported by backend: {e}")
    except ConfirmationRequiredError as e:
        raise HTTPException(status_code=409, detail=str(e))
    logger.warning("Registration database wiped by admin")
    return Response(status_code=204)
