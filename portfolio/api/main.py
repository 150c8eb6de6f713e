import logging
import os
import time
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from portfolio.feeds import FETCH_FAILED, USERNAME_REQUIRED, MediumFeed, UpstreamError, normalize_handle

# Carrega variáveis do .env
load_dotenv(override=True)

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def feed_for(username: str) -> MediumFeed:
    # ponto de injeção para testes
    return MediumFeed(username)

#%% APP

app = FastAPI(title="portfolio")

# Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=512)

@app.get("/health")
def health():
    return {"status": "ok", "ts": int(time.time())}

@app.get("/api/medium")
def medium_articles(username: Optional[str] = None):
    """
    Busca o feed do Medium do `username` e devolve até 12 artigos normalizados.
    Erros de origem são logados e respondidos com mensagem genérica (nunca a causa real).
    """
    handle = normalize_handle(username)
    if not handle:
        return JSONResponse({"error": USERNAME_REQUIRED}, status_code=400)

    try:
        articles = feed_for(handle).fetch_articles()
    except UpstreamError as e:
        logger.error("Error fetching Medium articles for '%s': %s", handle, e)
        return JSONResponse({"error": FETCH_FAILED}, status_code=500)
    except Exception:
        logger.exception("Unexpected error processing Medium feed for '%s'", handle)
        return JSONResponse({"error": FETCH_FAILED}, status_code=500)

    return {"articles": [a.to_wire() for a in articles]}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("portfolio.api.main:app", host="0.0.0.0", port=8000, reload=True)
