from academy.routers.health import router as health_router
from academy.routers.players import router as players_router
from academy.routers.schema_status import router as schema_status_router

__all__ = ["health_router", "players_router", "schema_status_router"]
