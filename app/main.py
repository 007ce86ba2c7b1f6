# EcoAction-Tracker/app/main.py
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app import config
from app.database import create_db_and_tables
from app.errors import StorageUnavailable, ValidationError
from app.routers.activities import router as activities_router


def init_storage():
    """Creates the tables, or stops the process if the database is unreachable."""
    try:
        create_db_and_tables()
    except SQLAlchemyError as e:
        print(f"ERROR: Database connection error: {e}")
        sys.exit(1)
    print("Database connection established successfully.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    print("Starting up and creating database tables...")
    init_storage()
    yield
    print("Shutting down...")

app = FastAPI(title="EcoAction API", lifespan=lifespan)

# CORS Middleware Configuration
# Requests without an Origin header (curl, server-side clients) are not affected
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# --- Error Handlers ---

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message, "errors": exc.errors},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return await validation_error_handler(request, ValidationError.from_pydantic(exc.errors()))


@app.exception_handler(StorageUnavailable)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailable):
    print(f"ERROR: {exc.message} ({request.method} {request.url.path}): {exc.detail}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": exc.message},
    )


app.include_router(activities_router, prefix="/api")


# Simple health check endpoint
@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "EcoAction API is running."


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=config.PORT)
