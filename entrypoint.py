"""Backend entrypoint. Starts uvicorn with host and port from settings."""
import uvicorn

from cost_tracker.config.settings import get_settings
from cost_tracker.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
