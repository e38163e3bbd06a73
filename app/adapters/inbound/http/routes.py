"""HTTP routes."""

from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Path, Query, UploadFile, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.adapters.inbound.http.admin_auth import require_admin_key
from app.adapters.inbound.http.schemas import FormErrorsResponse, UploadResponse
from app.application.dtos.car import Car, CarDraft, CarUpdate
from app.application.dtos.image import ImageUpload
from app.application.dtos.inquiry import Inquiry, InquiryRequest
from app.application.errors import CarNotFoundError, InventoryError
from app.application.use_cases.validate_car_form import CarFormValidator
from app.domain.value_objects.gearshift import Gearshift
from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import log_event
from app.infrastructure.wiring.dependencies import (
    create_car_repository,
    create_catalog_browser,
    create_image_storage,
    create_inquiry_repository,
    create_inventory_service,
    create_submit_inquiry,
    create_upload_car_images,
)

router = APIRouter()
admin_router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin_key)])

# Create use case instances (wired with dependencies)
_image_storage = create_image_storage()
_inventory_service = create_inventory_service(create_car_repository(), _image_storage)
_upload_car_images = create_upload_car_images(_image_storage)
_inquiry_repository = create_inquiry_repository()
_submit_inquiry = create_submit_inquiry(_inquiry_repository)
_car_form_validator = CarFormValidator()


def _raise_http_error(err: InventoryError) -> NoReturn:
    """Map an inventory error to an HTTP error with its generic message."""
    if isinstance(err, CarNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(err)) from err


def _form_errors_response(errors: dict[str, str]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=FormErrorsResponse(errors=errors).model_dump(),
    )


async def _get_car_or_404(car_id: str) -> Car:
    try:
        car = await _inventory_service.get_by_id(car_id)
    except InventoryError as err:
        _raise_http_error(err)
    if car is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Car not found")
    return car


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/cars", response_model=list[Car])
async def list_cars(
    type: Optional[str] = Query(None, description='Vehicle type; "all" for every type'),
    max_price: Optional[str] = Query(None, description="Price ceiling in KSh"),
) -> list[Car]:
    """
    List the public catalog with the type and price filters applied together.

    Args:
        type: Vehicle type filter (case-insensitive)
        max_price: Inclusive price ceiling

    Returns:
        Matching cars in name order
    """
    browser = create_catalog_browser(_inventory_service)
    await browser.load()
    if browser.error:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=browser.error)

    browser.select_type(type)
    try:
        browser.select_max_price(max_price)
    except ValueError as err:
        raise HTTPException(
            status_code=422,
            detail="max_price must be a whole number",
        ) from err

    return browser.displayed


@router.get("/cars/sorted", response_model=list[Car])
async def list_cars_sorted(ascending: bool = Query(True)) -> list[Car]:
    """
    List every car sorted by price; type/price filters do not apply.

    Args:
        ascending: Cheapest first when true

    Returns:
        Sorted cars
    """
    try:
        return await _inventory_service.sorted_by_price(ascending)
    except InventoryError as err:
        _raise_http_error(err)


@router.get("/cars/gearshift/{gearshift}", response_model=list[Car])
async def list_cars_by_gearshift(gearshift: Gearshift) -> list[Car]:
    """
    List cars with one gearshift.

    Args:
        gearshift: Automatic or Manual

    Returns:
        Matching cars in name order
    """
    try:
        return await _inventory_service.by_gearshift(gearshift)
    except InventoryError as err:
        _raise_http_error(err)


@router.get("/cars/seats/{seats}", response_model=list[Car])
async def list_cars_by_seats(seats: int = Path(..., ge=0)) -> list[Car]:
    """
    List cars with at least the given number of seats.

    Args:
        seats: Inclusive lower bound

    Returns:
        Matching cars in name order
    """
    try:
        return await _inventory_service.by_seats_at_least(seats)
    except InventoryError as err:
        _raise_http_error(err)


@router.get("/cars/{car_id}", response_model=Car)
async def get_car(car_id: str) -> Car:
    """
    Get one car for the detail view.

    Args:
        car_id: Car identifier

    Returns:
        The car

    Raises:
        HTTPException: 404 if no car has that id
    """
    return await _get_car_or_404(car_id)


@router.post("/inquiries", status_code=status.HTTP_201_CREATED, response_model=Inquiry)
async def submit_inquiry(request: InquiryRequest) -> Inquiry:
    """
    Record an order/contact message.

    Args:
        request: Name, phone, email, message and optional car id

    Returns:
        Stored inquiry
    """
    return await _submit_inquiry.execute(request)


@router.get("/debug/inquiries", status_code=status.HTTP_200_OK)
async def get_inquiries_debug() -> dict:
    """
    Get all inquiries (only enabled if DEBUG_MODE=true).

    Returns:
        List of inquiries

    Raises:
        HTTPException: 404 if DEBUG_MODE is disabled
    """
    if not settings.debug_mode:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Debug endpoint is disabled",
        )

    inquiries = await _inquiry_repository.list()

    return {
        "inquiries": [inquiry.model_dump(mode="json") for inquiry in inquiries],
        "count": len(inquiries),
    }


@admin_router.get("/cars", response_model=list[Car])
async def admin_list_cars() -> list[Car]:
    """
    List every car for the admin dashboard.

    Returns:
        All cars in name order
    """
    try:
        return await _inventory_service.list_all()
    except InventoryError as err:
        _raise_http_error(err)


@admin_router.post(
    "/cars",
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": FormErrorsResponse}},
)
async def admin_create_car(draft: CarDraft):
    """
    Add a car after validating the form fields.

    Args:
        draft: Car fields

    Returns:
        Creation status, or 422 with field errors
    """
    errors = _car_form_validator.validate(draft)
    if errors:
        log_event("http", "create_rejected", fields=sorted(errors))
        return _form_errors_response(errors)

    try:
        await _inventory_service.create(draft)
    except InventoryError as err:
        _raise_http_error(err)

    return {"status": "created"}


@admin_router.patch("/cars/{car_id}", responses={422: {"model": FormErrorsResponse}})
async def admin_update_car(car_id: str, changes: CarUpdate):
    """
    Update a car; the merged result must pass form validation.

    Args:
        car_id: Car identifier
        changes: Fields to overwrite

    Returns:
        Update status, or 422 with field errors
    """
    existing = await _get_car_or_404(car_id)
    try:
        merged = Car.model_validate(
            {**existing.model_dump(), **changes.model_dump(exclude_unset=True)}
        )
    except ValidationError as err:
        errors = {
            str(error["loc"][0]) if error["loc"] else "car": error["msg"]
            for error in err.errors()
        }
        log_event("http", "update_rejected", car_id=car_id, fields=sorted(errors))
        return _form_errors_response(errors)

    errors = _car_form_validator.validate(merged)
    if errors:
        log_event("http", "update_rejected", car_id=car_id, fields=sorted(errors))
        return _form_errors_response(errors)

    try:
        await _inventory_service.update(car_id, changes)
    except InventoryError as err:
        _raise_http_error(err)

    return {"status": "updated", "car_id": car_id}


@admin_router.delete("/cars/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_car(car_id: str) -> None:
    """
    Delete a car and its stored images.

    Args:
        car_id: Car identifier
    """
    car = await _get_car_or_404(car_id)
    try:
        await _inventory_service.delete(car)
    except InventoryError as err:
        _raise_http_error(err)


@admin_router.post("/images", response_model=UploadResponse)
async def admin_upload_images(files: list[UploadFile] = File(...)) -> UploadResponse:
    """
    Upload car images and return their public URLs.

    Args:
        files: Image files in display order

    Returns:
        URLs of stored images and messages for skipped files
    """
    uploads = [
        ImageUpload(
            filename=file.filename or "image",
            content_type=file.content_type or "",
            data=await file.read(),
        )
        for file in files
    ]
    result = await _upload_car_images.execute(uploads)
    return UploadResponse(urls=result.urls, errors=result.errors)
