"""Top level API router registration."""
from fastapi import APIRouter, FastAPI

from share_registry.api.routes import client_profiles, dmat_accounts, health, reports, shareholders, transfers


def register_routes(application: FastAPI) -> None:
    """Register all API routers with the FastAPI application."""
    api_router = APIRouter(prefix="/api")

    api_router.include_router(health.router, tags=["health"])
    api_router.include_router(client_profiles.router, prefix="/client-profiles", tags=["client-profiles"])
    api_router.include_router(shareholders.router, prefix="/shareholders", tags=["shareholders"])
    api_router.include_router(dmat_accounts.router, prefix="/dmat", tags=["dmat"])
    api_router.include_router(transfers.router, prefix="/transfers", tags=["transfers"])
    api_router.include_router(reports.router, tags=["reports"])

    application.include_router(api_router)


__all__ = ["register_routes"]
