from .user_controller import router as user_router
from .health_controller import router as health_router
from .root_controller import router as root_router


__all__ = ["user_router", "health_router", "root_router"]
