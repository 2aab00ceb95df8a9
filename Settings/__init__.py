# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from dotenv import load_dotenv
import os

load_dotenv()

def _bool(anahtar: str, varsayilan: bool) -> bool:
    deger = os.environ.get(anahtar)
    if deger is None:
        return varsayilan

    return deger.strip().lower() in ("1", "true", "yes", "on")

HOST      = os.environ.get("HOST", "0.0.0.0")
PORT      = int(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

PROXY_ENABLED    = _bool("PROXY_ENABLED", True)
UPSTREAM_TIMEOUT = float(os.environ.get("UPSTREAM_TIMEOUT", "15"))
USER_AGENT       = os.environ.get(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
ACCEPT_LANGUAGE  = os.environ.get("ACCEPT_LANGUAGE", "en-US,en;q=0.9")

SEGMENT_CACHE_MAX_AGE = int(os.environ.get("SEGMENT_CACHE_MAX_AGE", "3600"))
