"""Club catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query

from campus_events.dependencies.store import get_store
from campus_events.schemas import ClubCreate, ClubRead
from campus_events.store.base import EventStore

router = APIRouter(prefix="/clubs", tags=["clubs"])


@router.get("", response_model=list[ClubRead])
async def list_clubs(store: EventStore = Depends(get_store)):
    return await store.get_all_clubs()


@router.get("/featured", response_model=list[ClubRead])
async def list_featured_clubs(
    limit: int = Query(5, ge=1, le=50),
    store: EventStore = Depends(get_store),
):
    """Featured clubs in catalog order."""
    return await store.get_featured_clubs(limit)


@router.get("/{club_id}", response_model=ClubRead)
async def get_club(
    club_id: int,
    store: EventStore = Depends(get_store),
):
    club = await store.get_club(club_id)
    if not club:
        raise HTTPException(status_code=404, detail="Club not found")
    return club


@router.post("", response_model=ClubRead, status_code=201)
async def create_club(
    payload: ClubCreate,
    store: EventStore = Depends(get_store),
):
    return await store.create_club(payload)
