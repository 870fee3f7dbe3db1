"""FastAPI web application for gymtracker."""

import logging
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, RedirectResponse

from gymtracker.api.client_page import CLIENT_PAGE_HTML
from gymtracker.api.errors import register_exception_handlers
from gymtracker.auth.dependencies import get_identity
from gymtracker.auth.identity import IdentityClaim, IdentityProvider, build_identity_provider
from gymtracker.config import Settings, get_settings
from gymtracker.database.memory_store import MemoryStore, get_store
from gymtracker.engine.summary import ClassSummary, parse_month, summarize_classes
from gymtracker.models.gym_class import GymClass, GymClassCreate, GymClassUpdate
from gymtracker.models.user import User

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"

GYM_CLASS_NOT_FOUND = "Gym class not found"

# Session endpoints: no identity required
auth_router = APIRouter(prefix="/api", tags=["auth"])

# Everything else runs behind the identity provider
api_router = APIRouter(prefix="/api", dependencies=[Depends(get_identity)])

pages_router = APIRouter()


@auth_router.get("/login")
async def login():
    """Demo login: no session is established."""
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


@auth_router.get("/logout")
async def logout():
    """Demo logout: no session is cleared."""
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


@api_router.get("/auth/user", response_model=User, tags=["auth"])
async def get_current_user(
    identity: IdentityClaim = Depends(get_identity),
    store: MemoryStore = Depends(get_store),
):
    """Return the caller's user profile, creating it on first request."""
    try:
        return store.ensure_user(identity.sub, identity.email)
    except Exception as e:
        logger.error(f"Error fetching user {identity.sub}: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch user")


@api_router.get("/gym-classes", response_model=List[GymClass], tags=["gym-classes"])
async def list_gym_classes(
    identity: IdentityClaim = Depends(get_identity),
    store: MemoryStore = Depends(get_store),
):
    """List the caller's classes, most recent date first."""
    try:
        return store.list_classes(identity.sub)
    except Exception as e:
        logger.error(f"Error listing gym classes for {identity.sub}: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch gym classes")


@api_router.get("/gym-classes/summary", response_model=ClassSummary, tags=["gym-classes"])
async def get_gym_class_summary(
    month: Optional[str] = Query(
        None,
        pattern=r"^\d{4}-(0[1-9]|1[0-2])$",
        description="Month for the monthly figures (YYYY-MM); defaults to the current month",
    ),
    identity: IdentityClaim = Depends(get_identity),
    store: MemoryStore = Depends(get_store),
):
    """Totals, weekly count, average attendance and monthly breakdown."""
    today = date.today()
    try:
        selected = parse_month(month) if month else today.replace(day=1)
    except ValueError as e:
        raise RequestValidationError([{"loc": ("query", "month"), "msg": str(e), "type": "value_error"}])
    try:
        classes = store.list_classes(identity.sub)
    except Exception as e:
        logger.error(f"Error summarizing gym classes for {identity.sub}: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to summarize gym classes")
    return summarize_classes(classes, selected, today)


@api_router.get("/gym-classes/{class_id}", response_model=GymClass, tags=["gym-classes"])
async def get_gym_class(class_id: str, store: MemoryStore = Depends(get_store)):
    """Get a single class record."""
    try:
        gym_class = store.get_class(class_id)
    except Exception as e:
        logger.error(f"Error fetching gym class {class_id}: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to fetch gym class")
    if not gym_class:
        raise HTTPException(status_code=404, detail=GYM_CLASS_NOT_FOUND)
    return gym_class


@api_router.post(
    "/gym-classes",
    response_model=GymClass,
    status_code=status.HTTP_201_CREATED,
    tags=["gym-classes"],
)
async def create_gym_class(
    payload: GymClassCreate,
    identity: IdentityClaim = Depends(get_identity),
    store: MemoryStore = Depends(get_store),
):
    """Record a new class for the caller."""
    logger.info(f"Creating gym class on {payload.date} (attendance={payload.attendance}) for {identity.sub}")
    try:
        store.ensure_user(identity.sub, identity.email)
        gym_class = store.create_class(payload, identity.sub)
    except Exception as e:
        logger.error(f"Error creating gym class: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create gym class")
    logger.info(f"Created gym class {gym_class.id}")
    return gym_class


@api_router.patch("/gym-classes/{class_id}", response_model=GymClass, tags=["gym-classes"])
async def update_gym_class(
    class_id: str,
    payload: GymClassUpdate,
    store: MemoryStore = Depends(get_store),
):
    """Apply the fields present in the payload to a class record."""
    updates = payload.model_dump(exclude_unset=True)
    try:
        gym_class = store.update_class(class_id, updates)
    except Exception as e:
        logger.error(f"Error updating gym class {class_id}: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to update gym class")
    if not gym_class:
        raise HTTPException(status_code=404, detail=GYM_CLASS_NOT_FOUND)
    return gym_class


@api_router.delete(
    "/gym-classes/{class_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["gym-classes"],
)
async def delete_gym_class(class_id: str, store: MemoryStore = Depends(get_store)):
    """Delete a class record."""
    try:
        deleted = store.delete_class(class_id)
    except Exception as e:
        logger.error(f"Error deleting gym class {class_id}: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete gym class")
    if not deleted:
        raise HTTPException(status_code=404, detail=GYM_CLASS_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@pages_router.get("/", response_class=HTMLResponse)
async def root():
    """Browser client."""
    return CLIENT_PAGE_HTML


@pages_router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": APP_VERSION}


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[MemoryStore] = None,
    identity_provider: Optional[IdentityProvider] = None,
) -> FastAPI:
    """Build an application with its own store and identity provider.

    Args:
        settings: Settings to use; read from the environment when omitted
        store: Record store; a fresh empty MemoryStore when omitted
        identity_provider: Overrides the provider chosen by `settings.auth_mode`

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="gymtracker API",
        description="Record gym class dates, attendance counts and notes",
        version=APP_VERSION,
    )
    app.state.store = store if store is not None else MemoryStore()
    app.state.identity_provider = identity_provider or build_identity_provider(settings)

    register_exception_handlers(app)
    app.include_router(auth_router)
    app.include_router(api_router)
    app.include_router(pages_router)

    logger.info(
        f"gymtracker {APP_VERSION} ready (identity provider: {type(app.state.identity_provider).__name__})"
    )
    return app
