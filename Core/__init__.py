# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi                 import FastAPI, Request, Response, Query
from fastapi.middleware.cors import CORSMiddleware
from Core.Modules            import lifespan
from fastapi.responses       import JSONResponse, PlainTextResponse

proxy_FastAPI = FastAPI(
    title       = "IPTV-Manifest-Proxy",
    openapi_url = None,
    docs_url    = None,
    redoc_url   = None,
    lifespan    = lifespan
)

# ! ----------------------------------------» Middlewares

proxy_FastAPI.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET", "OPTIONS"], allow_headers=["*"], expose_headers=["Content-Range", "Accept-Ranges", "Content-Length"])

# ! ----------------------------------------» Routers

from Core.Modules          import _istek, _hata
from Public.API.Routers    import api_router

proxy_FastAPI.include_router(api_router)
