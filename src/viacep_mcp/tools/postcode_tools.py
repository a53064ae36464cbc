from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from viacep_mcp.app.container import Container


class LookupCepArgs(BaseModel):
    cep: str = Field(..., description="CEP a consultar, ex.: '01001000' ou '01001-000'")
    timeout_seconds: float | None = Field(
        None,
        gt=0,
        le=60,
        description="Prazo máximo da consulta em segundos (padrão: LOOKUP_TIMEOUT_SECONDS)",
    )


def register_postcode_tools(mcp: FastMCP, container: Container) -> None:
    postcode_service = container.postcode_service

    @mcp.tool(
        name="lookup_cep",
        description=(
            "Consulta um CEP brasileiro no ViaCEP e retorna logradouro, bairro, cidade, UF e códigos "
            "IBGE/GIA/DDD/SIAFI. Em caso de falha retorna error.kind: invalid_input, not_found, "
            "transport, decode ou cancelled."
        ),
    )
    async def lookup_cep(cep: str, timeout_seconds: float | None = None) -> dict[str, Any]:
        """
        CEP → endereço.

        - cep: repassado ao ViaCEP sem normalização; o próprio serviço rejeita CEPs malformados.
        """
        try:
            args = LookupCepArgs(cep=cep, timeout_seconds=timeout_seconds)
        except PydanticValidationError as e:
            return {
                "address": None,
                "error": {"kind": "invalid_argument", "message": str(e)},
            }

        result = await postcode_service.lookup(cep=args.cep, timeout_seconds=args.timeout_seconds)
        return result.to_dict()
