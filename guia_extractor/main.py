import uvicorn

from guia_extractor.config.settings import Settings


def main() -> None:
    """Entry point: serve the API, building the app once at startup."""
    settings = Settings()
    uvicorn.run(
        "guia_extractor.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
