# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core import proxy_FastAPI, Request
from time import perf_counter
import logging

konsol = logging.getLogger("Core.istek")

@proxy_FastAPI.middleware("http")
async def istek_kaydi(request: Request, call_next):
    baslangic = perf_counter()
    response  = await call_next(request)
    sure      = (perf_counter() - baslangic) * 1000

    log_ip = request.headers.get("X-Forwarded-For") or (request.client.host if request.client else "-")
    konsol.info("%s %s %s » %d (%.1f ms)", log_ip, request.method, request.url.path, response.status_code, sure)

    return response
