"""Maps domain errors onto HTTP responses.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Anything that is not a
DomainError goes to DRF's default handler, and from there unhandled
errors propagate as 500s.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from marketplace.domain.errors import DomainError, ErrorCode, IntegrityViolationError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VENDOR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.INTEGRITY_VIOLATION: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def domain_exception_handler(exc, context):
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    if isinstance(exc, IntegrityViolationError):
        request = context.get("request")
        logger.error(
            "Integrity violation on %s: %s",
            request.path if request is not None else "<unknown>",
            exc.detail,
        )

    return Response(
        {"error": {"code": exc.code.value, "message": exc.message}},
        status=STATUS_BY_CODE[exc.code],
    )
