from pydantic import AliasChoices, BaseModel, Field, field_validator

from .models import LineItem, Product

MAX_TEXT_LENGTH = 1000  # characters per transcription


# --- Catalog ---

class ProductIn(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    price: float = Field(0.0, ge=0, allow_inf_nan=False)
    unit: str = ""
    supplier_id: str = Field("", validation_alias=AliasChoices("supplier_id", "supplierId"))
    supplier_name: str | None = Field(None, validation_alias=AliasChoices("supplier_name", "supplierName"))

    @field_validator("name")
    @classmethod
    def _canonical_name(cls, v: str) -> str:
        v = v.lower().strip()
        if not v:
            raise ValueError("product name must not be empty")
        return v

    @field_validator("supplier_id")
    @classmethod
    def _trim_supplier_id(cls, v: str) -> str:
        return v.strip()

    @field_validator("supplier_name")
    @classmethod
    def _blank_supplier_is_unresolved(cls, v: str | None) -> str | None:
        return v or None

    def to_product(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=self.price,
            unit=self.unit,
            supplier_id=self.supplier_id,
            supplier_name=self.supplier_name,
        )


# --- Voice order ---

class ParseRequest(BaseModel):
    text: str = Field("", max_length=MAX_TEXT_LENGTH)
    language: str | None = None
    catalog: list[ProductIn] | None = None
    announce: bool = False


class LineItemResponse(BaseModel):
    product_id: str
    name: str
    quantity: int
    price: float
    unit: str
    supplier_id: str
    supplier_name: str | None

    @classmethod
    def from_line(cls, line: LineItem) -> "LineItemResponse":
        p = line.product
        return cls(
            product_id=p.id,
            name=p.name,
            quantity=line.quantity,
            price=p.price,
            unit=p.unit,
            supplier_id=p.supplier_id,
            supplier_name=p.supplier_name,
        )


class ParseResponse(BaseModel):
    outcome: str
    message: str
    language: str
    items: list[LineItemResponse]
    unresolved: list[str]
    token_count: int


class SynonymResponse(BaseModel):
    key: str
    variants: list[str]


# --- System ---

class ServiceStatus(BaseModel):
    name: str
    status: str  # "ok" / "degraded" / "unavailable"
    detail: str = ""


class HealthResponse(BaseModel):
    status: str
    synonym_keys: int
    services: list[ServiceStatus] = []
