import logging

import uvicorn

from portfolio.core.config import settings

logger = logging.getLogger("portfolio")


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server is running on http://localhost:%s", settings.PORT)
    uvicorn.run("portfolio.main:app", host="0.0.0.0", port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
