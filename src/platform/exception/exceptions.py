class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class RefreshInProgressError(ConflictError):
    """Another reconciliation pass already holds the event"""

    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f'Stats refresh already in progress for event {event_id}')
