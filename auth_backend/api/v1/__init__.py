from .auth_controller import router as auth_router
from .health_controller import router as health_router
from .error_handlers import request_validation_exception_handler


__all__ = ["auth_router", "health_router", "request_validation_exception_handler"]
