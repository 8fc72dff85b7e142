from finboard.presentation.api.routers.bank_accounts import (
    router as bank_accounts_router,
)
from finboard.presentation.api.routers.institutions import (
    router as institutions_router,
)

__all__ = [
    "bank_accounts_router",
    "institutions_router",
]
