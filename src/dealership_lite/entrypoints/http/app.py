import logging

from fastapi import FastAPI

from dealership_lite.entrypoints.http.exception_handlers import register_exception_handlers
from dealership_lite.entrypoints.http.routes.admin import router as admin_router
from dealership_lite.entrypoints.http.routes.contact import router as contact_router
from dealership_lite.entrypoints.http.routes.health import router as health_router
from dealership_lite.entrypoints.http.routes.orders import router as orders_router
from dealership_lite.entrypoints.http.routes.services import router as services_router
from dealership_lite.entrypoints.http.routes.valuations import router as valuations_router
from dealership_lite.entrypoints.http.routes.vehicles import router as vehicles_router
from dealership_lite.infra.config import log_level


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Dealership Lite API",
        description="""
        Car dealership API: browse stock, price orders, value trade-ins
        and capture leads.

        ## Features
        - Search the vehicle stock with filters
        - Order summary pricing and order placement
        - Trade-in value estimate and sell requests
        - Service booking and contact messages
        - Admin dashboard with stock toggling

        ## Authentication
        None. Lead submissions are logged, not stored.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(orders_router, prefix="/v1")
    app.include_router(valuations_router, prefix="/v1")
    app.include_router(services_router, prefix="/v1")
    app.include_router(contact_router, prefix="/v1")
    app.include_router(admin_router, prefix="/v1")

    return app


app = build_app()
