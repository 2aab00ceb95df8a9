# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from dataclasses  import dataclass, field
from urllib.parse import urlparse
from httpx        import AsyncClient as AsyncSession, HTTPError
from .errors      import FetchFailure
from Settings     import UPSTREAM_TIMEOUT, USER_AGENT, ACCEPT_LANGUAGE
import logging

konsol = logging.getLogger(__name__)

PASS_THROUGH_HEADERS = ("Content-Range", "Accept-Ranges", "Content-Length")

@dataclass
class UpstreamResponse:
    url         : str
    status_code : int
    reason      : str
    headers     : dict[str, str] = field(default_factory=dict)
    body        : bytes          = b""
    encoding    : str            = "utf-8"

    @property
    def text(self) -> str:
        return self.body.decode(self.encoding or "utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    @property
    def is_manifest(self) -> bool:
        return is_manifest(self.content_type, self.url)

    def pass_through_headers(self, *, include_length: bool = True) -> dict[str, str]:
        """Range ile ilgili upstream header'larını olduğu gibi kopyalar"""
        kopya = {}
        for header in PASS_THROUGH_HEADERS:
            if header == "Content-Length" and not include_length:
                continue

            deger = self.headers.get(header.lower())
            if deger:
                kopya[header] = deger

        # httpx sıkıştırılmış gövdeyi açtığında upstream uzunluğu artık geçerli değil
        if "Content-Length" in kopya and "content-encoding" in self.headers:
            del kopya["Content-Length"]

        return kopya

def is_manifest(content_type: str, url: str) -> bool:
    return "mpegurl" in content_type.lower() or urlparse(url).path.lower().endswith(".m3u8")

def upstream_session() -> AsyncSession:
    return AsyncSession(follow_redirects=True, timeout=UPSTREAM_TIMEOUT)

def upstream_headers(range_header: str = "", user_agent: str = "", referer: str = "") -> dict[str, str]:
    headers = {
        "User-Agent"      : user_agent or USER_AGENT,
        "Accept"          : "*/*",
        "Accept-Language" : ACCEPT_LANGUAGE,
    }

    if range_header:
        headers["Range"] = range_header

    if referer:
        headers["Referer"] = referer
        parsed = urlparse(referer)
        if parsed.scheme and parsed.netloc:
            headers["Origin"] = f"{parsed.scheme}://{parsed.netloc}"

    return headers

async def fetch_upstream(url: str, headers: dict[str, str]) -> UpstreamResponse:
    """
    Hedef URL'ye tek bir GET isteği atar.

    Gövde yalnızca 2xx yanıtlarda okunur; hata durumlarında sadece durum kodu ve header'lar döner.
    Ağ / DNS / zaman aşımı hataları FetchFailure olarak yükselir; tekrar denenmez.
    """
    try:
        async with upstream_session() as session:
            response = await session.send(session.build_request("GET", url, headers=headers), stream=True)
            try:
                sonuc = UpstreamResponse(
                    url         = url,
                    status_code = response.status_code,
                    reason      = response.reason_phrase,
                    headers     = {anahtar.lower(): deger for anahtar, deger in response.headers.items()},
                )

                if not sonuc.ok:
                    konsol.info("%s » upstream %d döndürdü", url, sonuc.status_code)
                    return sonuc

                sonuc.body     = await response.aread()
                sonuc.encoding = response.encoding or "utf-8"
            finally:
                await response.aclose()
    except HTTPError as hata:
        konsol.warning("%s » upstream isteği başarısız: %s", url, hata)
        raise FetchFailure(str(hata) or type(hata).__name__) from hata

    return sonuc
