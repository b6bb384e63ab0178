"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from photo_slideshow.config import Settings


def main() -> None:
    """Run the API server on the configured host and port."""
    settings = Settings()
    print(f"Photo Slideshow API on http://localhost:{settings.port}")
    print(f"API reference: http://localhost:{settings.port}/api/")
    uvicorn.run(
        "photo_slideshow.api.app:build_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
