from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import Settings, settings as default_settings
from .routes.receipts import router as receipts_router, INVALID_RECEIPT
from .rules.engine import RulesEngine
from .storage.repository import ReceiptRepository
from .utils.logging import configure_logging, logger

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Scores purchase receipts with reward points",
        version="0.1.0",
    )

    app.state.settings = settings
    app.state.rules_engine = RulesEngine()
    app.state.repository = ReceiptRepository()

    app.include_router(receipts_router)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        # undecodable JSON / wrong field types are a bad receipt, not a 422
        logger.info("Rejected undecodable request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"detail": INVALID_RECEIPT})

    @app.get("/health")
    def health():
        return {"ok": True}

    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
