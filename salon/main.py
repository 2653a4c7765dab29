from fastapi import FastAPI

from salon.api.routes import router as api_router
from salon.core.logging import configure_logging
from salon.infrastructure.store.memory_backend import InMemorySalonBackend


def create_app(backend: InMemorySalonBackend | None = None) -> FastAPI:
    """Development backend serving the salon REST contract from memory."""
    app = FastAPI(title="Salon Dev Backend", version="1.0.0")
    app.state.backend = backend or InMemorySalonBackend()
    app.include_router(api_router, tags=["salon"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


configure_logging()

app = create_app()
