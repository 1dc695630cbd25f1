# backend/inventory_app/schemas/product_schema.py
from typing import Optional
from pydantic import BaseModel, Base64Bytes, Field, field_validator
from pydantic import ConfigDict

JPEG_MAGIC = b"\xff\xd8\xff"
# largest value an sqlite INTEGER column can hold
MAX_INTEGER = 2**63 - 1


class ProductCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0, le=MAX_INTEGER)
    price: int = Field(..., ge=0, le=MAX_INTEGER)
    picture: Optional[bytes] = None


class ProductUpdate(BaseModel):
    """
    Sparse set of changes for one product. Only fields that were explicitly
    set are written; see `changes()`.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")
    name: Optional[str] = Field(None, min_length=1)
    quantity: Optional[int] = Field(None, ge=0, le=MAX_INTEGER)
    price: Optional[int] = Field(None, ge=0, le=MAX_INTEGER)
    picture: Optional[bytes] = None

    @field_validator("name", "quantity", "price")
    @classmethod
    def required_columns_not_null(cls, v, info):
        # only reached when the caller passed the field explicitly
        if v is None:
            raise ValueError(f"{info.field_name} cannot be cleared")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ProductRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    quantity: int
    price: int
    picture: Optional[bytes] = None


def _check_jpeg(v: Optional[bytes]) -> Optional[bytes]:
    if v is not None and not v.startswith(JPEG_MAGIC):
        raise ValueError("picture must be JPEG encoded")
    return v


class ProductIn(BaseModel):
    """Create payload for the HTTP API; picture is base64 in JSON."""
    name: str
    quantity: int
    price: int
    picture: Optional[Base64Bytes] = None

    @field_validator("picture")
    @classmethod
    def picture_is_jpeg(cls, v):
        return _check_jpeg(v)


class ProductPatch(BaseModel):
    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[int] = None
    picture: Optional[Base64Bytes] = None

    @field_validator("picture")
    @classmethod
    def picture_is_jpeg(cls, v):
        return _check_jpeg(v)


class ProductOut(BaseModel):
    id: int
    name: str
    quantity: int
    price: int
    price_display: str
    has_picture: bool
