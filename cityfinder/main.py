import copy
import logging
import logging.config

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from uvicorn.config import LOGGING_CONFIG

from cityfinder.config import settings
from cityfinder.router_health import router as health_router
from cityfinder.router_pages import router as pages_router

LOGGING = copy.deepcopy(LOGGING_CONFIG)
LOGGING["formatters"]["default"]["fmt"] = "%(asctime)s %(levelprefix)s [%(name)s] %(message)s"
LOGGING["formatters"]["default"]["datefmt"] = "%Y-%m-%d %H:%M:%S"
LOGGING["formatters"]["access"]["fmt"] = (
    '%(asctime)s %(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s'
)
LOGGING["formatters"]["access"]["datefmt"] = "%Y-%m-%d %H:%M:%S"
# route our own module loggers through uvicorn's default handler
LOGGING["loggers"]["cityfinder"] = {"handlers": ["default"], "level": "INFO", "propagate": False}

logging.config.dictConfig(LOGGING)

app = FastAPI(title="CityFinder")
app.add_middleware(GZipMiddleware, minimum_size=512)

app.include_router(health_router)
# catch-all page route must stay last
app.include_router(pages_router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=LOGGING)
