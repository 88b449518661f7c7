# app/core/exceptions.py
"""
Error taxonomy shared by the services.

Services raise these; app.main translates them into
{"message": ...} JSON responses with the matching status code.
"""
from fastapi import status


class ServiceError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InsufficientStockError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, medicine_name: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for '{medicine_name}'. "
            f"Available: {available}, Requested: {requested}"
        )
        self.medicine_name = medicine_name
        self.available = available
        self.requested = requested


class PaymentNotSuccessfulError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Payment not successful"):
        super().__init__(message)


class GatewayError(ServiceError):
    """Payment provider unreachable or erroring. Safe for the caller to retry."""

    status_code = status.HTTP_502_BAD_GATEWAY


class PersistenceError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
