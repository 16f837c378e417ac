"""Errors raised by the order domain."""


class OrderError(Exception):
    """Base class for order domain errors."""


class InvalidStatusTransitionError(OrderError):
    def __init__(self, current: str, action: str) -> None:
        self.current = current
        self.action = action
        super().__init__(f"Invalid status transition from {current} when trying to {action}")


class OrderValidationError(OrderError):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Validation error: {message}")