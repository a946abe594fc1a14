from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI

from carbay.entrypoints.http.exception_handlers import register_exception_handlers
from carbay.entrypoints.http.routes.activity import router as activity_router
from carbay.entrypoints.http.routes.cars import router as cars_router
from carbay.entrypoints.http.routes.compare import router as compare_router
from carbay.entrypoints.http.routes.favorites import router as favorites_router
from carbay.entrypoints.http.routes.financing import router as financing_router
from carbay.entrypoints.http.routes.health import router as health_router
from carbay.store.car_store import CarStore
from carbay.store.factory import build_car_store


def build_app(store_factory: Callable[[], CarStore] = build_car_store) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # One store per application: opened before the first request, closed on shutdown
        car_store = store_factory().open()
        app.state.car_store = car_store
        try:
            yield
        finally:
            car_store.close()
            app.state.car_store = None

    app = FastAPI(
        title="Carbay API",
        description="""
        Local-first marketplace for pre-owned cars.

        ## Features
        - Browse and search the catalog together with your own listings
        - Sell, edit and delete your listings
        - Favorites, a comparison of up to 3 cars, and activity history
        - EMI estimates

        ## Authentication
        None. All state belongs to the single local user.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(favorites_router, prefix="/v1")
    app.include_router(compare_router, prefix="/v1")
    app.include_router(activity_router, prefix="/v1")
    app.include_router(financing_router, prefix="/v1")

    return app


app = build_app()
