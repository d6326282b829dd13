"""Exception types raised while wiring shadowmute into a host runtime."""
from typing import Optional, Any


class ShadowmuteError(Exception):
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class StartupError(ShadowmuteError):
    """Moderation state is unreliable; the host must not continue."""
    error_code = "STARTUP_FAILED"

    def __init__(self, message: str, store_path: Optional[str] = None) -> None:
        details = {"store_path": store_path} if store_path else None
        super().__init__(message, details)
        self.store_path = store_path
