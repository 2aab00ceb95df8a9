# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from contextlib import asynccontextmanager
from fastapi    import FastAPI
from Settings   import LOG_LEVEL, PROXY_ENABLED
import logging

logging.basicConfig(
    level  = getattr(logging, LOG_LEVEL, logging.INFO),
    format = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
)

konsol = logging.getLogger("Core")

@asynccontextmanager
async def lifespan(app: FastAPI):
    konsol.info("%s başlatıldı » proxy %s", app.title, "açık" if PROXY_ENABLED else "kapalı")
    yield
    konsol.info("%s kapatıldı", app.title)
