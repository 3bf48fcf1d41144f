from tabungan.presentation.api.routers.auth import router as auth_router
from tabungan.presentation.api.routers.banking import router as banking_router
from tabungan.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "banking_router",
    "users_router",
]
