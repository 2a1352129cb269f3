import logging

import uvicorn

from services.users.config import load_config
from services.users.main import build_app

LOGGER = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = build_app(config)
    LOGGER.info("Server is running at %s:%s", config.api_host, config.api_port)
    uvicorn.run(app, host=config.api_host, port=config.api_port)


if __name__ == "__main__":
    main()
