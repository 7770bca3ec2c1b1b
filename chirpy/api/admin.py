from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.responses import HTMLResponse

from chirpy.api.deps import get_counter, get_settings, get_store, require_dev
from chirpy.core.counter import VisitCounter
from chirpy.core.errors import respond_with_json
from chirpy.core.logging import log
from chirpy.core.settings import Settings
from chirpy.services.store import ChirpStore

router = APIRouter(prefix="/admin", tags=["admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""

@router.get("/metrics", response_class=HTMLResponse)
async def metrics(counter: VisitCounter = Depends(get_counter)):
    return HTMLResponse(METRICS_TEMPLATE.format(hits=counter.snapshot()))

@router.post("/reset")
async def reset(
    settings: Settings = Depends(get_settings),
    counter: VisitCounter = Depends(get_counter),
    store: ChirpStore = Depends(get_store),
):
    require_dev(settings, "reset")
    # Users go first; the counter is only zeroed once storage succeeded.
    await store.delete_users()
    counter.reset()
    log.info("admin_reset")
    return respond_with_json(200, {"ok": True})
