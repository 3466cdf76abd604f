"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routes import health, ids
from config import build_generator, load_config
from core.errors import BaseSuidError
from core.health import HealthChecker, check_event_loop, create_generator_check
from internal.logging import StructuredLogger, get_logger, parse_level


def create_app(config=None, generator=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    logger_instance = get_logger()

    generator = generator or build_generator(config.generator)
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("generator", create_generator_check(generator), critical=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Application starting", version="1.0.0",
                             instance_id=generator.instance_id, landmark_year=generator.landmark_year)
        yield
        logger_instance.info("Application shutdown complete", period=generator.period)

    app = FastAPI(
        title="SUID Generator",
        version="1.0.0",
        description="time-ordered 63-bit unique id service",
        lifespan=lifespan,
    )
    app.state.generator = generator

    @app.exception_handler(BaseSuidError)
    async def generator_error(request: Request, exc: BaseSuidError):
        logger_instance.error("Id generation failed", error=exc, path=request.url.path)
        return JSONResponse(status_code=503, content=exc.to_dict())

    # Initialize route modules with dependencies
    ids.init(generator)
    health.init(generator, health_checker)

    app.include_router(ids.router)
    app.include_router(health.router)

    return app
