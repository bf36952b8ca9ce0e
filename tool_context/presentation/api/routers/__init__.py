from .tools_router import router as tools_router
from .servers_router import router as servers_router

__all__ = ["tools_router", "servers_router"]
