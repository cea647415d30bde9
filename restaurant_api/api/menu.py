"""Menu browsing API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.database import get_db
from restaurant_api.errors import raise_for_failure
from restaurant_api.schemas.menu import MenuItemResponse, MenuSearchResult
from restaurant_api.services import catalog

router = APIRouter()


@router.get("", response_model=List[MenuItemResponse])
async def list_menu_items(
    category: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """List menu items, optionally for one category"""
    result = await catalog.get_menu(db, category)
    raise_for_failure(result)
    return result.items


@router.get("/categories", response_model=List[str])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """Distinct menu categories"""
    result = await catalog.get_categories(db)
    raise_for_failure(result)
    return result.items


@router.get("/search", response_model=MenuSearchResult)
async def search_menu(
    query: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
):
    """Search menu items by name or description"""
    result = await catalog.search_menu(db, query)
    raise_for_failure(result)
    return MenuSearchResult(items=result.items, total=len(result.items))
