"""Root Route — plain-text status banner.

Invariants:
    - GET / never touches the database and always answers 200 text/plain
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from movies_api.config import get_settings
from movies_api.infrastructure.host_info import hostname, local_ipv4

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
async def banner():
    port = get_settings().port
    return (
        f"Movies API running! "
        f"(Hostname: {hostname()}, IP: {local_ipv4()}:{port})"
    )
