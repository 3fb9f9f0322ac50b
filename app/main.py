from fastapi import FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool

from app import config
from app.models import InboundRequest
from app.services import proxy

# ------------------------------------------------------------------
# 🌟 Environment + App setup
# ------------------------------------------------------------------
app = FastAPI(title="Gemini Proxy", version="0.1.0")
app.state.api_key = config.get_api_key()

# ------------------------------------------------------------------
# 🧠 Health
# ------------------------------------------------------------------
@app.get("/healthz")
def health():
    return {"ok": True}

# ------------------------------------------------------------------
# 🧩 Function
# ------------------------------------------------------------------
# Every verb is routed here so the 405 comes from the proxy itself.
@app.api_route(config.FUNCTION_PATH, methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def gemini_proxy(request: Request):
    body = (await request.body()).decode("utf-8", errors="replace")
    inbound = InboundRequest(httpMethod=request.method, body=body)
    # proxy.handle blocks on the upstream call
    result = await run_in_threadpool(proxy.handle, inbound, app.state.api_key)
    return Response(content=result.body, status_code=result.statusCode, media_type="application/json")
