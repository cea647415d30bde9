"""Failure classes reported in operation results"""

import enum

from fastapi import HTTPException


class ErrorCode(str, enum.Enum):
    """Why an operation did not succeed"""
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    TRANSACTION_FAILURE = "transaction_failure"
    INVALID_OR_EXPIRED = "invalid_or_expired"
    MINIMUM_NOT_MET = "minimum_not_met"


# HTTP status used by the resource routes for each failure class
ERROR_STATUS = {
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.CONFLICT: 409,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.TRANSACTION_FAILURE: 500,
    ErrorCode.INVALID_OR_EXPIRED: 400,
    ErrorCode.MINIMUM_NOT_MET: 400,
}


def raise_for_failure(result) -> None:
    """Turn a failed operation result into the matching HTTP error"""
    if result.success:
        return
    status_code = ERROR_STATUS.get(result.error, 400)
    raise HTTPException(status_code=status_code, detail=result.message)
