"""Process entrypoint: ``python -m stats_service.serve``."""
import uvicorn

from stats_service import config
from stats_service.observability.logging import logging_config


def main() -> None:
    uvicorn.run(
        "stats_service.main:app",
        host=config.HOST,
        port=config.PORT,
        log_config=logging_config(),
    )


if __name__ == "__main__":
    main()
