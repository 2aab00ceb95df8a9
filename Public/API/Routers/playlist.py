# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core     import JSONResponse, PlainTextResponse, Query
from .        import api_router
from ..Libs   import fetch_upstream, upstream_headers, ProxyError
from Settings import PROXY_ENABLED
import logging

konsol = logging.getLogger(__name__)

@api_router.get("/proxy-m3u")
async def playlist_proxy(url: str = Query("", description="M3U playlist URL")):
    """M3U playlist'i olduğu gibi getirir, URL'lere dokunmaz"""
    if not PROXY_ENABLED:
        raise ProxyError("Proxy disabled", 503)

    if not url:
        return JSONResponse(status_code=400, content={"error": "URL is required"})

    try:
        upstream = await fetch_upstream(url, upstream_headers())
    except Exception as e:
        message = e.message if isinstance(e, ProxyError) else str(e)
        return JSONResponse(status_code=500, content={"error": message})

    if not upstream.ok:
        return JSONResponse(status_code=500, content={"error": f"Failed to fetch: {upstream.reason}"})

    konsol.debug("%s » %d bayt playlist", url, len(upstream.body))

    return PlainTextResponse(upstream.text, headers={"Access-Control-Allow-Origin": "*"})
