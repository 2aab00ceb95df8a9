# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from fastapi import APIRouter

api_router = APIRouter(prefix="/api")

from . import proxy, playlist
