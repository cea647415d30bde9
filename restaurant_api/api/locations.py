"""Store locator endpoint"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.database import get_db
from restaurant_api.errors import raise_for_failure
from restaurant_api.schemas.location import LocationResponse
from restaurant_api.services import catalog

router = APIRouter()


@router.get("", response_model=List[LocationResponse])
async def list_locations(db: AsyncSession = Depends(get_db)):
    """All branches grouped by city"""
    result = await catalog.get_locations(db)
    raise_for_failure(result)
    return result.items
