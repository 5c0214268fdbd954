from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from todo_api.bootstrap import init_db
from todo_api.config import CORS_ORIGINS, HOST, PORT
from todo_api.errors import TodoApiError
from todo_api.routers import auth, assignees, todos, transfer
from todo_api.utils.logger import setup_logging, get_logger

setup_logging()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Todo Tracker API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(assignees.router)
app.include_router(todos.router)
app.include_router(transfer.router)


@app.exception_handler(TodoApiError)
async def todo_api_error_handler(request: Request, exc: TodoApiError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Malformed payloads share the flat 400 convention instead of FastAPI's 422
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in errors
    ) or "Invalid input"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
