from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from viacep_mcp.core.errors import ErrorKind


class AddressRecord(BaseModel):
    """Address payload returned by ``GET /ws/{cep}/json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    postal_code: str = Field("", alias="cep")
    street: str = Field("", alias="logradouro")
    complement: str = Field("", alias="complemento")
    district: str = Field("", alias="bairro")
    city: str = Field("", alias="localidade")
    state: str = Field("", alias="uf")
    ibge: str = ""
    gia: str = ""
    area_code: str = Field("", alias="ddd")
    siafi: str = ""

    # ViaCEP marks unknown CEPs inside an otherwise successful 200 payload
    not_found: bool = Field(False, alias="erro")

    @field_validator(
        "postal_code",
        "street",
        "complement",
        "district",
        "city",
        "state",
        "ibge",
        "gia",
        "area_code",
        "siafi",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def empty(cls) -> AddressRecord:
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude={"not_found"})


@dataclass(frozen=True)
class LookupResult:
    address: AddressRecord = field(default_factory=AddressRecord.empty)
    error_kind: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def to_dict(self) -> dict[str, Any]:
        if self.error_kind is None:
            return {"address": self.address.to_dict(), "error": None}
        return {"address": None, "error": {"kind": self.error_kind.value, "message": self.message}}
