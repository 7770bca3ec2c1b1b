from __future__ import annotations
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.responses import PlainTextResponse

from chirpy.core.settings import Settings
from chirpy.core.counter import VisitCounter
from chirpy.core.errors import install_error_handlers
from chirpy.core.logging import configure_logging, log
from chirpy.core.middleware import RequestLogMiddleware, VisitCounterMiddleware
from chirpy.db.session import make_engine, make_sessionmaker
from chirpy.services.store import ChirpStore, SqlChirpStore
from chirpy.api import admin, chirps, users

def create_app(settings: Settings | None = None, store: ChirpStore | None = None) -> FastAPI:
    settings = settings or Settings()

    if store is None:
        engine = make_engine(settings.db_url)
        store = SqlChirpStore(make_sessionmaker(engine), engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("serving", filepath_root=settings.filepath_root, port=settings.port, platform=settings.platform)
        yield
        close = getattr(app.state.store, "close", None)
        if close is not None:
            await close()

    app = FastAPI(title="Chirpy API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.counter = VisitCounter()
    app.state.store = store

    install_error_handlers(app)

    app.add_middleware(VisitCounterMiddleware, counter=app.state.counter, prefix="/app")
    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(admin.router)
    app.include_router(users.router)
    app.include_router(chirps.router)

    @app.get("/api/healthz", response_class=PlainTextResponse)
    async def healthz():
        return PlainTextResponse("OK")

    app.mount("/app", StaticFiles(directory=settings.filepath_root, html=True), name="app")
    return app

def app_factory() -> FastAPI:
    """Process entrypoint: ``uvicorn chirpy.main:app_factory --factory``.

    Configures logging once for the process.
    """
    settings = Settings()
    configure_logging(settings.log_level, settings.log_json)
    return create_app(settings)

def main() -> None:
    import uvicorn
    app = app_factory()
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)

if __name__ == "__main__":
    main()
