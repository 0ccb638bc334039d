from roster.presentation.api.routers.auth import router as auth_router
from roster.presentation.api.routers.students import router as students_router

__all__ = [
    "auth_router",
    "students_router",
]
