# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Core     import Request, Response, Query
from .        import api_router
from ..Libs   import rewrite_m3u8_urls, fetch_upstream, upstream_headers, ProxyError, MissingParameter, UpstreamError, FetchFailure
from Settings import PROXY_ENABLED, SEGMENT_CACHE_MAX_AGE

MANIFEST_MEDIA_TYPE = "application/vnd.apple.mpegurl"

@api_router.get("/proxy-manifest")
async def manifest_proxy(
    request: Request,
    url: str        = Query("", description="Manifest / segment URL"),
    user_agent: str = Query("", description="Custom User-Agent header"),
    referer: str    = Query("", description="Custom Referer header")
):
    """
    HLS manifest / segment proxy

    Manifest ise içindeki tüm URL'ler bu endpoint'e yönlendirilir,
    değilse gövde olduğu gibi (Range header'larıyla birlikte) döndürülür.
    """
    if not PROXY_ENABLED:
        raise ProxyError("Proxy disabled", 503)

    if not url:
        raise MissingParameter()

    headers = upstream_headers(request.headers.get("range", ""), user_agent, referer)

    try:
        upstream = await fetch_upstream(url, headers)

        if not upstream.ok:
            raise UpstreamError(upstream.status_code)

        if upstream.is_manifest:
            content = rewrite_m3u8_urls(upstream.text, url, user_agent, referer)

            return Response(
                content     = content.encode("utf-8"),
                status_code = upstream.status_code,
                media_type  = MANIFEST_MEDIA_TYPE,
                headers     = {
                    **upstream.pass_through_headers(include_length=False),
                    "Access-Control-Allow-Origin" : "*",
                }
            )

        return Response(
            content     = upstream.body,
            status_code = upstream.status_code,
            headers     = {
                **upstream.pass_through_headers(),
                "Content-Type"                : upstream.content_type,
                "Access-Control-Allow-Origin" : "*",
                "Cache-Control"               : f"public, max-age={SEGMENT_CACHE_MAX_AGE}",
            }
        )

    except ProxyError:
        raise
    except Exception as e:
        raise FetchFailure(str(e) or type(e).__name__) from e
