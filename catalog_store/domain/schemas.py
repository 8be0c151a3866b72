"""Validation schemas for entity writes.

Create schemas describe an entity without its id and timestamps; those are
assigned by the store and are rejected when a caller supplies them. Update
schemas make every field optional and only the fields that were set are merged.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .entities import OrderStatus


class _WriteSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    def to_fields(self) -> dict:
        """Fields to hand to the store, enums flattened to their values."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)


class ProductCreate(_WriteSchema):
    """Schema for creating a product."""
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    image_url: str = ""
    inventory: int = Field(0, ge=0)

    def to_fields(self) -> dict:
        return self.model_dump(mode="json")


class ProductUpdate(_WriteSchema):
    """Schema for updating a product."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    tags: Optional[List[str]] = None
    image_url: Optional[str] = None
    inventory: Optional[int] = Field(None, ge=0)


class ArticleCreate(_WriteSchema):
    """Schema for creating an article."""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = ""
    category: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)

    def to_fields(self) -> dict:
        return self.model_dump(mode="json")


class ArticleUpdate(_WriteSchema):
    """Schema for updating an article."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    tags: Optional[List[str]] = None


class CustomerInfoSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if "@" not in v:
            raise ValueError("Email must contain '@'")
        return v


class OrderItemSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    name: str = ""
    price: float = Field(0.0, ge=0)


class OrderCreate(_WriteSchema):
    """Schema for placing an order."""
    items: List[OrderItemSchema] = Field(..., min_length=1)
    customer_info: CustomerInfoSchema
    total_amount: float = Field(..., ge=0)
    status: OrderStatus = OrderStatus.PENDING

    def to_fields(self) -> dict:
        return self.model_dump(mode="json")


class OrderUpdate(_WriteSchema):
    """Schema for updating an order."""
    items: Optional[List[OrderItemSchema]] = Field(None, min_length=1)
    customer_info: Optional[CustomerInfoSchema] = None
    total_amount: Optional[float] = Field(None, ge=0)
    status: Optional[OrderStatus] = None
