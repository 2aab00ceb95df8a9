# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .errors       import ProxyError, MissingParameter, UpstreamError, FetchFailure
from .rewrite_m3u8 import LineKind, classify_line, manifest_base, resolve_url, build_proxy_url, rewrite_uri_attribute, rewrite_m3u8_urls
from .upstream     import UpstreamResponse, is_manifest, upstream_headers, fetch_upstream
