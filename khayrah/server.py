from contextlib import asynccontextmanager
from typing import Annotated, Any
import logging

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from khayrah.ai.agent import build_model, send_feeling
from khayrah.ai.schema import FeelRequest, FeelResponse
from khayrah.config import load_cors_origins, load_settings
from khayrah.errors import LLMError, ModelOutputError
from khayrah.services.quran_audio import attach_audio

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # Fails startup rather than every request when the key is missing.
    settings = load_settings()
    app.state.model = build_model(settings)
    logger.info("Starting backend model=%s", settings.model)
    yield
    logger.info("Shutting down backend")


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=load_cors_origins(),
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


def get_model(request: Request):
    return request.app.state.model


ModelDep = Annotated[Any, Depends(get_model)]


@app.get("/")
async def root():
    return {"Health": "OK"}


@app.get("/api/feel")
async def feel_wrong_method():
    return JSONResponse(
        status_code=405,
        content={"error": "Use POST", "hint": "POST JSON { input: 'I feel ...' }"},
        headers={"Allow": "POST, OPTIONS"},
    )


@app.post("/api/feel", response_model=FeelResponse)
async def feel(req: FeelRequest, model: ModelDep) -> JSONResponse:
    logger.info("feel_request input_len=%d profile=%s", len(req.input), req.profile is not None)

    try:
        payload = await send_feeling(model, req.input, req.profile)
    except LLMError as e:
        raise HTTPException(
            status_code=e.status_code or 502,
            detail={"error": "LLM error", "detail": str(e)},
        ) from e
    except ModelOutputError as e:
        logger.warning("bad_model_json raw_len=%d", len(e.raw))
        raise HTTPException(
            status_code=502,
            detail={"error": "Bad JSON from model", "raw": e.raw},
        ) from e

    return JSONResponse(content=attach_audio(payload))
