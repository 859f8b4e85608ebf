# sales_inquiry/main.py

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from authentication.api.routes import router as auth_router
from sales.api.routes import router as sales_router
from sales_inquiry.config import settings
from sales_inquiry.errors import SalesInquiryError, StoreUnavailable
from utils.logging_factory import get_logger

logger = get_logger("sales_inquiry")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sales Inquiry API",
        description="Employee login and access-scoped sales search with Excel export.",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        swagger_ui_parameters={"persistAuthorization": True},
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router, prefix="/api/auth")
    app.include_router(sales_router, prefix="/api/sales")

    @app.exception_handler(SalesInquiryError)
    async def sales_inquiry_error_handler(request: Request, exc: SalesInquiryError):
        if isinstance(exc, StoreUnavailable):
            logger.error(f"❌ {request.method} {request.url.path} failed: store unavailable")
        else:
            logger.warning(f"⚠️ {request.method} {request.url.path} -> {exc.status_code} {exc.code}")
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": "Invalid request.", "code": "validation_error"})

    @app.get("/api/health", tags=["Health"])
    def healthcheck():
        return {"status": "ok", "service": "sales_inquiry"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "sales_inquiry.main:app",
        host="0.0.0.0",
        port=3001,
        reload=False
    )
