"""Catalog and calculator session endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from nutrition_calculator.api.models import (
    FoodListResponse,
    FoodModel,
    SessionResponse,
    SetFoodRequest,
    SetQuantityRequest,
)
from nutrition_calculator.containers import AppContainer
from nutrition_calculator.services.entries import FoodEntryList

router = APIRouter(tags=["calculator"])


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


def require_session(
    session_id: UUID, container: AppContainer = Depends(_get_container)
) -> FoodEntryList:
    """Resolve the entry list of a session or fail with 404."""
    entry_list = container.session_service.get_session(session_id)
    if entry_list is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )
    return entry_list


def _entry_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found"
    )


@router.get("/foods")
async def list_foods(
    request: Request,
    query: str | None = None,
    limit: int | None = Query(default=None, ge=1),
) -> FoodListResponse:
    """Return catalog foods sorted by name, optionally filtered."""
    container = _get_container(request)
    foods = container.catalog_service.search(query, limit)
    return FoodListResponse(foods=[FoodModel.from_record(food) for food in foods])


@router.get("/foods/{name}")
async def get_food(name: str, request: Request) -> FoodModel:
    """Return one catalog food by exact name."""
    food = _get_container(request).catalog_service.find(name)
    if food is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
        )
    return FoodModel.from_record(food)


@router.post("/sessions", status_code=status.HTTP_201_CREATED)
async def create_session(request: Request) -> SessionResponse:
    """Start a new calculator session."""
    session_id, entry_list = _get_container(request).session_service.create_session()
    return SessionResponse.from_list(session_id, entry_list)


@router.get("/sessions/{session_id}")
async def get_session(
    session_id: UUID, entry_list: FoodEntryList = Depends(require_session)
) -> SessionResponse:
    """Return entries and totals for a session."""
    return SessionResponse.from_list(session_id, entry_list)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: UUID, request: Request) -> None:
    """Close a session."""
    if not _get_container(request).session_service.delete_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Session not found"
        )


@router.post("/sessions/{session_id}/entries", status_code=status.HTTP_201_CREATED)
async def add_entry(
    session_id: UUID, entry_list: FoodEntryList = Depends(require_session)
) -> SessionResponse:
    """Append an empty entry."""
    entry_list.add_entry()
    return SessionResponse.from_list(session_id, entry_list)


@router.delete("/sessions/{session_id}/entries/{entry_id}")
async def remove_entry(
    session_id: UUID,
    entry_id: int,
    entry_list: FoodEntryList = Depends(require_session),
) -> SessionResponse:
    """Remove an entry; unknown ids leave the session unchanged."""
    entry_list.remove_entry(entry_id)
    return SessionResponse.from_list(session_id, entry_list)


@router.put("/sessions/{session_id}/entries/{entry_id}/food")
async def set_entry_food(
    session_id: UUID,
    entry_id: int,
    payload: SetFoodRequest,
    request: Request,
    entry_list: FoodEntryList = Depends(require_session),
) -> SessionResponse:
    """Select or clear the food of an entry."""
    food = None
    if payload.food_name is not None:
        food = _get_container(request).catalog_service.find(payload.food_name)
        if food is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
            )
    if entry_list.set_entry_food(entry_id, food) is None:
        raise _entry_not_found()
    return SessionResponse.from_list(session_id, entry_list)


@router.put("/sessions/{session_id}/entries/{entry_id}/quantity")
async def set_entry_quantity(
    session_id: UUID,
    entry_id: int,
    payload: SetQuantityRequest,
    entry_list: FoodEntryList = Depends(require_session),
) -> SessionResponse:
    """Set the quantity in grams of an entry."""
    if entry_list.set_entry_quantity(entry_id, payload.quantity) is None:
        raise _entry_not_found()
    return SessionResponse.from_list(session_id, entry_list)
