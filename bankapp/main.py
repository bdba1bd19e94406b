"""
Bank App: FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from bankapp.config import get_settings
from bankapp.logging_config import configure_logging
from bankapp.api.health import router as health_router
from bankapp.api.accounts import router as accounts_router

settings = get_settings()

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Accounts, deposits, withdrawals and transfers",
    debug=settings.DEBUG,
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bankapp.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
