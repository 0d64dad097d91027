"""FastAPI server exposing the restaurant list over HTTP."""

import logging
import threading
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jmc import __version__
from jmc.config import get_config, setup_logging
from jmc.models import Restaurant, RestaurantData, SaveRequest
from jmc.services import (
    RepositoryError,
    RestaurantNotFoundError,
    RestaurantRepository,
    RestaurantService,
    merge_batch,
)
from jmc.validation import (
    RestaurantValidationError,
    validate_restaurant,
    validate_unique_names,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan manager."""
    config = get_config()
    logger.info(f"Starting jmc server on {config.server_host}:{config.server_port}")
    logger.info(f"Data file: {config.data_file}")

    repository = RestaurantRepository(config.data_file)
    if not repository.exists():
        logger.warning(f"{config.data_file} not found - run 'jmc init' to create it")

    # Store service in app state for dependency injection
    _app.state.restaurant_service = RestaurantService(repository)
    # Every write is load-modify-save of the whole file
    _app.state.write_lock = threading.Lock()

    yield

    logger.info("Shutting down jmc server")


app = FastAPI(
    title="jmc API",
    description="Personal restaurant list and recommender",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_restaurant_service(request: Request) -> RestaurantService:
    """Dependency to get the restaurant service from app state.

    Raises:
        HTTPException: If the service is not initialized
    """
    service = getattr(request.app.state, "restaurant_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Service not initialized yet")
    return service


def get_write_lock(request: Request) -> threading.Lock:
    return request.app.state.write_lock


@app.exception_handler(RestaurantValidationError)
async def validation_error_handler(_request: Request, exc: RestaurantValidationError):
    logger.warning(f"Rejected invalid restaurant: {exc}")
    return JSONResponse(
        status_code=400,
        content={
            "error": str(exc),
            "kind": exc.kind.value,
            "field": exc.field,
            "path": exc.path,
            "index": exc.index,
        },
    )


@app.exception_handler(RestaurantNotFoundError)
async def not_found_handler(_request: Request, exc: RestaurantNotFoundError):
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(RepositoryError)
async def repository_error_handler(_request: Request, exc: RepositoryError):
    logger.error(f"Storage error: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "jmc-api"}


@app.get("/api/restaurants", response_model=RestaurantData)
def get_restaurants(service: RestaurantService = Depends(get_restaurant_service)):
    return service.get_all()


@app.get("/api/restaurants/recommend", response_model=Restaurant | None)
def recommend_restaurant(service: RestaurantService = Depends(get_restaurant_service)):
    """Return one random restaurant, or null if the list is empty."""
    return service.recommend()


@app.post("/api/restaurants", status_code=201, response_model=Restaurant)
def create_restaurant(
    item: Restaurant,
    service: RestaurantService = Depends(get_restaurant_service),
    lock: threading.Lock = Depends(get_write_lock),
):
    validate_restaurant(item)
    with lock:
        current = service.get_all().restaurants or []
        validate_unique_names([*current, item])
        service.create(item)
    return item


@app.put("/api/restaurants/{name}", response_model=Restaurant)
def update_restaurant(
    name: str,
    item: Restaurant,
    service: RestaurantService = Depends(get_restaurant_service),
    lock: threading.Lock = Depends(get_write_lock),
):
    validate_restaurant(item)
    with lock:
        current = list(service.get_all().restaurants or [])
        index = next((i for i, r in enumerate(current) if r.name == name), None)
        if index is not None:
            current[index] = item
            validate_unique_names(current)
        service.update(name, item)
    return item


@app.delete("/api/restaurants/{name}", status_code=204)
def delete_restaurant(
    name: str,
    service: RestaurantService = Depends(get_restaurant_service),
    lock: threading.Lock = Depends(get_write_lock),
):
    with lock:
        service.delete(name)
    return Response(status_code=204)


@app.post("/api/restaurants/save", response_model=RestaurantData)
def save_restaurants(
    save_request: SaveRequest,
    service: RestaurantService = Depends(get_restaurant_service),
    lock: threading.Lock = Depends(get_write_lock),
):
    """Apply a batch of new, updated and deleted restaurants.

    Request body:
        {
            "new": [{...restaurant...}],
            "update": [{...restaurant...}],
            "delete": ["name", ...]
        }

    Every new and updated restaurant is validated, and the merged list must
    not repeat a name, before anything is written.
    """
    for index, item in enumerate(save_request.new):
        try:
            validate_restaurant(item)
        except RestaurantValidationError as e:
            raise e.within("new", index) from e
    for index, item in enumerate(save_request.update):
        try:
            validate_restaurant(item)
        except RestaurantValidationError as e:
            raise e.within("update", index) from e

    with lock:
        current = service.get_all().restaurants or []
        validate_unique_names(merge_batch(current, save_request))
        return service.save_batch(save_request)


def run_server():
    """Run the FastAPI server using uvicorn."""
    setup_logging()
    config = get_config()

    uvicorn.run(
        "jmc.server:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run_server()
