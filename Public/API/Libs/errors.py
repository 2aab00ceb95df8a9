# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

class ProxyError(Exception):
    """Proxy isteğini sonlandıran, düz metin olarak döndürülen hata"""
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

class MissingParameter(ProxyError):
    status_code = 400

    def __init__(self, message: str = "URL required"):
        super().__init__(message)

class UpstreamError(ProxyError):
    def __init__(self, status_code: int):
        super().__init__(f"Target returned {status_code}", status_code)

class FetchFailure(ProxyError):
    status_code = 500
