"""Tests for GET /api/proxy-m3u."""

import httpx

from Public.API.Routers import playlist as playlist_router

PLAYLIST = '#EXTM3U\n#EXTINF:-1 tvg-id="one",Channel One\nhttp://iptv.example/one.m3u8\n'


def test_missing_url(client, fake_upstream):
    response = client.get("/api/proxy-m3u")

    assert response.status_code == 400
    assert response.json() == {"error": "URL is required"}
    assert fake_upstream.requests == []


def test_returns_playlist_unchanged(client, fake_upstream):
    fake_upstream.respond(lambda request: httpx.Response(200, text=PLAYLIST))

    response = client.get("/api/proxy-m3u", params={"url": "https://lists.example/tv.m3u"})

    assert response.status_code == 200
    assert response.text == PLAYLIST
    assert "Mozilla/5.0" in fake_upstream.requests[0].headers["user-agent"]


def test_upstream_failure(client, fake_upstream):
    fake_upstream.respond(lambda request: httpx.Response(404))

    response = client.get("/api/proxy-m3u", params={"url": "https://lists.example/missing.m3u"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch: Not Found"}


def test_network_error(client, fake_upstream):
    def refuse(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    fake_upstream.respond(refuse)

    response = client.get("/api/proxy-m3u", params={"url": "https://nowhere.invalid/tv.m3u"})

    assert response.status_code == 500
    assert response.json() == {"error": "Name or service not known"}


def test_cross_origin_header(client, fake_upstream):
    fake_upstream.respond(lambda request: httpx.Response(200, text=PLAYLIST))

    response = client.get("/api/proxy-m3u", params={"url": "https://lists.example/tv.m3u"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_proxy_disabled(client, fake_upstream, monkeypatch):
    monkeypatch.setattr(playlist_router, "PROXY_ENABLED", False)

    response = client.get("/api/proxy-m3u", params={"url": "https://lists.example/tv.m3u"})

    assert response.status_code == 503
    assert response.text == "Proxy disabled"
    assert fake_upstream.requests == []
