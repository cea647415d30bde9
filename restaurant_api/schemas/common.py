"""Shared result envelopes"""

from typing import Any, List, Optional
from pydantic import BaseModel

from restaurant_api.errors import ErrorCode


class ActionResult(BaseModel):
    """Outcome of an operation: success flag plus a human-readable message"""
    success: bool
    message: str
    error: Optional[ErrorCode] = None


class CatalogResult(ActionResult):
    """Rows of a catalog query, empty when the query failed"""
    items: List[Any] = []
