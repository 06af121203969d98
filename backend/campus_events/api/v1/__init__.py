"""API v1 router aggregation."""

from fastapi import APIRouter

from campus_events.api.v1.clubs import router as clubs_router
from campus_events.api.v1.events import router as events_router
from campus_events.api.v1.feedback import router as feedback_router
from campus_events.api.v1.preferences import router as preferences_router
from campus_events.api.v1.recommendations import router as recommendations_router

router = APIRouter(prefix="/api/v1")

router.include_router(events_router)
router.include_router(clubs_router)
router.include_router(preferences_router)
router.include_router(recommendations_router)
router.include_router(feedback_router)
