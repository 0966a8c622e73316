"""FastAPI server exposing outfit generation endpoints."""

from fastapi import FastAPI, HTTPException, Request

from logic.validation import GenerateOutfitsRequest, GenerateOutfitsResponse
from stylist_app.app import OutfitStylistApp
from stylist_app.logging_config import configure_logging, correlation_context

CORRELATION_HEADER = "X-Correlation-ID"

configure_logging()

stylist_app = OutfitStylistApp()
app = FastAPI(title="Outfit Stylist", version="0.1.0")


@app.middleware("http")
async def bind_correlation_id(request: Request, call_next):
    """Scope each request's logs to the caller's correlation id, or a fresh one."""

    with correlation_context(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        response = await call_next(request)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response


@app.get("/healthz")
def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "outfit-stylist",
        "environment": stylist_app.config.environment or "local",
    }


@app.post("/outfits/generate", response_model=GenerateOutfitsResponse, response_model_exclude_none=True)
def generate_outfits(request: GenerateOutfitsRequest) -> dict:
    """Rank outfits for the supplied catalog and occasion."""

    catalog = [item.to_item(request.user_id) for item in request.items]
    response = stylist_app.generate(
        user_id=request.user_id,
        items=catalog,
        occasion=request.occasion,
        max_outfits=request.max_outfits,
    )
    if response["status"] != "ok":
        raise HTTPException(status_code=400, detail=response.get("message") or "outfit generation failed")
    return response


@app.get("/outfits/history/{user_id}")
def generation_history(user_id: str, limit: int | None = None) -> list:
    """Return opaque summaries of past generations, oldest first."""

    return [summary.to_dict() for summary in stylist_app.history_for(user_id, limit=limit)]


@app.get("/wardrobe/sample")
def sample_wardrobe(user_id: str = "demo") -> list:
    """Return the sample catalog for trying the generator."""

    return [item.to_dict() for item in stylist_app.sample_wardrobe(user_id)]


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
