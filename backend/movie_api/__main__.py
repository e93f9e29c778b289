"""Run the Movies API with uvicorn: ``python -m movie_api``."""

import uvicorn

from movie_api.config import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None: uvicorn loggers propagate to the handler from setup_logging
    uvicorn.run(
        "movie_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
