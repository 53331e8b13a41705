"""
FastAPI main application for the Bookshelf API.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import Body, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import APIConfig, config as default_api_config
from api.models import HealthResponse, ResponseEnvelope, ResponseStatus
from bookshelf.models import BookPayload
from bookshelf.outcome import Outcome
from bookshelf.query import BookFilter
from bookshelf.store import BookStore
from utilities.config import config
from utilities.logger import StoreLogger, get_logger, setup_logging

# Setup logging
logger = get_logger(__name__)


def get_book_store(request: Request) -> BookStore:
    """Store owned by the running application."""
    return request.app.state.book_store


def outcome_response(outcome: Outcome) -> JSONResponse:
    """Translate a store outcome into an HTTP response."""
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_envelope())


def envelope_response(status_code: int, envelope_status: ResponseStatus, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ResponseEnvelope(status=envelope_status, message=message).render()
    )


def describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one message, e.g. ``pageCount: Input should be ...``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "Invalid request: " + "; ".join(parts)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.get_log_file_path(),
        debug=config.debug
    )
    logger.info("Starting Bookshelf API", books_stored=len(app.state.book_store))

    yield

    logger.info("Shutting down Bookshelf API")


def create_app(
    book_store: Optional[BookStore] = None,
    api_config: Optional[APIConfig] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        book_store: Store to serve; a fresh one is created when omitted
        api_config: API settings; the global config when omitted

    Returns:
        Configured FastAPI application
    """
    api_config = api_config or default_api_config

    app = FastAPI(
        title=api_config.api_title,
        description=api_config.api_description,
        version=api_config.api_version,
        lifespan=lifespan
    )
    if book_store is None:
        book_store = BookStore(
            id_length=config.book_id_length,
            logger=StoreLogger().bind_context(service=api_config.api_title)
        )
    app.state.book_store = book_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_credentials=api_config.cors_allow_credentials,
        allow_methods=api_config.cors_allow_methods,
        allow_headers=api_config.cors_allow_headers,
    )

    # Exception handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseEnvelope(status=ResponseStatus.FAIL, message=str(exc.detail)).render(),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request payloads."""
        message = describe_validation_errors(exc)
        logger.info("Rejected request payload", path=request.url.path, detail=message)
        return envelope_response(status.HTTP_400_BAD_REQUEST, ResponseStatus.FAIL, message)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger.error("Unhandled exception", error=str(exc), path=request.url.path)
        message = f"Internal server error: {exc}" if api_config.debug else "Internal server error"
        return envelope_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ResponseStatus.ERROR, message)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(book_store: BookStore = Depends(get_book_store)):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=api_config.api_version,
            books_stored=len(book_store)
        )

    # Books endpoints
    @app.post("/books", status_code=status.HTTP_201_CREATED, tags=["Books"])
    async def add_book(
        payload: BookPayload = Body(...),
        book_store: BookStore = Depends(get_book_store)
    ):
        """
        Add a book to the shelf.

        - **name**: required, non-empty
        - **readPage**: must not exceed **pageCount**
        """
        return outcome_response(book_store.create(payload))

    @app.get("/books", tags=["Books"])
    async def get_books(
        name: Optional[str] = None,
        reading: Optional[str] = None,
        finished: Optional[str] = None,
        book_store: BookStore = Depends(get_book_store)
    ):
        """
        List books as ``{id, name, publisher}`` summaries.

        - **name**: case-insensitive substring of the book name
        - **reading**: ``1`` for books being read, ``0`` for the rest
        - **finished**: ``1`` for finished books, ``0`` for the rest

        Any other value for **reading** or **finished** leaves that filter off.
        """
        book_filter = BookFilter.from_query(name=name, reading=reading, finished=finished)
        return outcome_response(book_store.list(book_filter))

    @app.get("/books/{book_id}", tags=["Books"])
    async def get_book(book_id: str, book_store: BookStore = Depends(get_book_store)):
        """Get a single book by ID."""
        return outcome_response(book_store.get(book_id))

    @app.put("/books/{book_id}", tags=["Books"])
    async def edit_book(
        book_id: str,
        payload: BookPayload = Body(...),
        book_store: BookStore = Depends(get_book_store)
    ):
        """Replace the editable fields of a book."""
        return outcome_response(book_store.update(book_id, payload))

    @app.delete("/books/{book_id}", tags=["Books"])
    async def delete_book(book_id: str, book_store: BookStore = Depends(get_book_store)):
        """Delete a book by ID."""
        return outcome_response(book_store.delete(book_id))

    # Statistics endpoint
    @app.get("/stats", tags=["Statistics"])
    async def get_stats(book_store: BookStore = Depends(get_book_store)):
        """Get shelf statistics."""
        return ResponseEnvelope(status=ResponseStatus.SUCCESS, data=book_store.stats()).render()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=default_api_config.host,
        port=default_api_config.port,
        reload=default_api_config.debug,
        log_level="info"
    )
