"""Deals, special offers and promo code endpoints"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.database import get_db
from restaurant_api.errors import raise_for_failure
from restaurant_api.schemas.menu import DealResponse, SpecialOfferResponse
from restaurant_api.schemas.promo import PromoApplyRequest, PromoResult
from restaurant_api.services import catalog, promos

router = APIRouter()


@router.get("/deals", response_model=List[DealResponse])
async def list_deals(db: AsyncSession = Depends(get_db)):
    """Active deals, highest priority first"""
    result = await catalog.get_deals(db)
    raise_for_failure(result)
    return result.items


@router.get("/offers", response_model=List[SpecialOfferResponse])
async def list_offers(db: AsyncSession = Depends(get_db)):
    """Special offers running today"""
    result = await catalog.get_offers(db)
    raise_for_failure(result)
    return result.items


@router.post("/promo_codes/apply", response_model=PromoResult)
async def apply_promo_code(
    request: PromoApplyRequest,
    db: AsyncSession = Depends(get_db),
):
    """Check a promo code against a cart total"""
    result = await promos.apply_promo(db, request.promo_code, request.total_amount)
    raise_for_failure(result)
    return result
