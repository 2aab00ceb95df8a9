# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from urllib.parse import urlparse, quote
from enum         import Enum
from typing       import Callable
import logging, re

konsol = logging.getLogger(__name__)

PROXY_PATH  = "/api/proxy-manifest"
URI_PATTERN = re.compile(r'URI="([^"]+)"')

class LineKind(Enum):
    BLANK            = "blank"
    COMMENT          = "comment"
    COMMENT_WITH_URI = "comment_with_uri"
    MEDIA_REFERENCE  = "media_reference"

def classify_line(line: str) -> LineKind:
    trimmed = line.strip()

    if not trimmed:
        return LineKind.BLANK

    if trimmed.startswith("#"):
        return LineKind.COMMENT_WITH_URI if 'URI="' in trimmed else LineKind.COMMENT

    return LineKind.MEDIA_REFERENCE

def manifest_base(target_url: str) -> tuple[str, str]:
    """
    Hedef URL'den (origin, base_dir) çiftini üretir.

    base_dir, path'in son '/' karakterine kadar olan kısmıdır; path boşsa origin + "/".
    """
    parsed = urlparse(target_url)
    host   = parsed.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if parsed.port:
        host += f":{parsed.port}"

    # kullanıcı:parola@ kısmı origin'e taşınmaz
    origin = f"{parsed.scheme}://{host}"
    path   = parsed.path

    if "/" not in path:
        return origin, f"{origin}/"

    return origin, origin + path[: path.rfind("/") + 1]

def resolve_url(value: str, origin: str, base_dir: str) -> str:
    if value.startswith("http"):
        return value

    if value.startswith("/"):
        return origin + value

    return base_dir + value

def build_proxy_url(resolved_url: str, user_agent: str = "", referer: str = "") -> str:
    proxy_url = f"{PROXY_PATH}?url={quote(resolved_url, safe='')}"
    if user_agent:
        proxy_url += f"&user_agent={quote(user_agent, safe='')}"
    if referer:
        proxy_url += f"&referer={quote(referer, safe='')}"

    return proxy_url

def rewrite_uri_attribute(line: str, resolver: Callable[[str], str]) -> str:
    """
    EXT-X-KEY, EXT-X-MEDIA, EXT-X-MAP gibi satırlardaki her URI="..." değerini resolver'dan geçirir
    """
    return URI_PATTERN.sub(lambda eslesme: f'URI="{resolver(eslesme.group(1))}"', line)

def rewrite_m3u8_urls(content: str, base_url: str, user_agent: str = "", referer: str = "") -> str:
    """
    M3U8 içindeki URL'leri proxy URL'lerine dönüştür

    Segment / alt playlist satırları tamamen proxy URL'si ile değiştirilir,
    etiket satırlarında yalnızca URI="..." değeri değişir. Boş ve URI içermeyen
    yorum satırları olduğu gibi kalır. Satır sonundaki \\r temizlenir.
    """
    origin, base_dir = manifest_base(base_url)

    def proxied(value: str) -> str:
        return build_proxy_url(resolve_url(value, origin, base_dir), user_agent, referer)

    result    = []
    rewritten = 0
    for line in content.split("\n"):
        line = line.rstrip("\r")
        kind = classify_line(line)

        if kind is LineKind.MEDIA_REFERENCE:
            result.append(proxied(line.strip()))
            rewritten += 1
        elif kind is LineKind.COMMENT_WITH_URI:
            result.append(rewrite_uri_attribute(line.strip(), proxied))
            rewritten += 1
        else:
            result.append(line)

    konsol.debug("%s » %d satır yeniden yazıldı", base_url, rewritten)

    return "\n".join(result)
