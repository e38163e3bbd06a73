"""HTTP adapter schemas."""

from pydantic import BaseModel, ConfigDict


class FormErrorsResponse(BaseModel):
    """Field-level validation errors for the admin car form."""

    errors: dict[str, str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "errors": {
                    "seats": "Seats must be between 1 and 10",
                    "images": "At least one image is required",
                }
            }
        }
    )


class UploadResponse(BaseModel):
    """Image upload batch response."""

    urls: list[str]
    errors: list[str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "urls": [
                    "https://cdn.example.com/storage/public/car-images/1718000000000-front.jpg"
                ],
                "errors": ["notes.pdf: Please select a valid image file (JPEG, PNG, or WebP)"],
            }
        }
    )
