from fastapi import FastAPI
from typing import Optional

from kotoba_service import __version__
from kotoba_service.api import word_detail
from kotoba_service.core.exceptions import setup_exception_handlers
from kotoba_service.core.middleware import logging_middleware, setup_cors_middleware
from kotoba_service.core.settings import Settings
from kotoba_service.core.startup import lifespan


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(
        title="Kotoba Service",
        version=__version__,
        lifespan=lifespan,
    )
    # The lifespan picks these settings up instead of reading the environment again
    app.state.settings = settings

    # CORS must be added before other middleware
    setup_cors_middleware(app, settings.CORS_ORIGINS)
    app.middleware("http")(logging_middleware)
    setup_exception_handlers(app)

    app.include_router(word_detail.router, prefix="/api", tags=["word-detail"])

    @app.get("/health")
    async def health():
        """
        Health check endpoint to confirm the service is running.
        """
        return {"status": "healthy", "service": "kotoba"}

    return app


app = create_app()


def run():
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
