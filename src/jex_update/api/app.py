from fastapi import FastAPI, Request, Response

from jex_update.api.dependencies import HandlerDep, build_lifespan
from jex_update.config import HEALTH_PATH, Settings, settings
from jex_update.dto import HealthCheckResponse
from jex_update.protocols import Clock, SourceClient


def create_app(
    config: Settings | None = None,
    source_client: SourceClient | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Create the update server application.

    Args:
        config: Settings to use. If None, uses the global settings.
        source_client: Source client override (defaults to GitHub).
        clock: Clock override (defaults to the system clock).

    Returns:
        Configured FastAPI app
    """
    config = config or settings

    app = FastAPI(
        title="JEX Update Server",
        description="Joomla extension update server backed by GitHub releases",
        version="0.1.0",
        lifespan=build_lifespan(config, source_client=source_client, clock=clock),
    )

    @app.get(f"/{HEALTH_PATH}", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/", response_class=Response)
    async def collection(request: Request, handler: HandlerDep) -> Response:
        """Collection index of every configured extension."""
        return await handler.get_feed(None, str(request.base_url))

    @app.get("/{extension}", response_class=Response)
    async def extension_feed(extension: str, request: Request, handler: HandlerDep) -> Response:
        """Update document of a single extension, e.g. /mod_weather.xml."""
        return await handler.get_feed(extension, str(request.base_url))

    return app


app = create_app()


def main() -> None:
    import uvicorn

    uvicorn.run(
        "jex_update.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
