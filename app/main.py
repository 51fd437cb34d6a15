from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.logging import configure_logging
from app.dependencies import get_verifier
from app.api.verify import router as api_router
from verification.exceptions import ConfigurationError, VerificationError

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Build the engine at startup so a bad mode fails before any request
    get_verifier()
    yield

app = FastAPI(
    title=settings.service_name,
    lifespan=lifespan
)

@app.exception_handler(VerificationError)
async def verification_error_handler(request: Request, exc: VerificationError):
    status_code = 500 if isinstance(exc, ConfigurationError) else 422
    return JSONResponse(status_code=status_code, content=exc.to_dict())

app.include_router(api_router, prefix="/v1")

@app.get("/health")
async def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.api_host, port=settings.api_port)
