# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core                  import proxy_FastAPI, Request, JSONResponse, PlainTextResponse
from starlette.exceptions  import HTTPException as StarletteHTTPException
from Public.API.Libs       import ProxyError
import logging

konsol = logging.getLogger("Core.hata")

@proxy_FastAPI.exception_handler(ProxyError)
async def proxy_exception_handler(request: Request, exc: ProxyError):
    """Proxy hataları düz metin olarak döner"""
    if exc.status_code >= 500:
        konsol.error("%s » %s", request.url.path, exc.message)

    return PlainTextResponse(
        content     = exc.message,
        status_code = exc.status_code,
        headers     = {"Access-Control-Allow-Origin": "*"}
    )

@proxy_FastAPI.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

@proxy_FastAPI.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    konsol.exception("Beklenmeyen hata » %s", request.url.path)

    return JSONResponse(status_code=500, content={"error": str(exc) or "Internal Server Error"})
