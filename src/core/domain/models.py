"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta y documentación autocontenida (Field) sin acoplar el
  Core al transporte (REST/API binaria) ni a la CLI.
- La serialización con alias (`Interface`, `Used`, `Size`) vive junto al
  modelo, así el exportador JSON no reinventa nombres de campos.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Todo es inmutable: se construye por ejecución a partir del estado del
  router y se descarta tras renderizar.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class AddressRange(BaseModel):
    """Sub-rango contiguo de un pool, expresado por el último octeto.

    `low <= high` se asume a partir de los datos del router (no se valida).
    """

    model_config = ConfigDict(frozen=True)

    low: int = Field(..., description="Último octeto de la dirección inicial.")
    high: int = Field(..., description="Último octeto de la dirección final.")

    @property
    def capacity(self) -> int:
        # high - low: the top boundary address is not counted.
        return self.high - self.low


class AddressPool(BaseModel):
    """Pool de direcciones con nombre, tal como lo define el router."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Nombre del pool en /ip/pool.")
    ranges: tuple[AddressRange, ...] = Field(
        default=(),
        description="Rangos definidos, en el orden reportado por el router.",
    )

    @property
    def capacity(self) -> int:
        return sum(r.capacity for r in self.ranges)


class DhcpBinding(BaseModel):
    """Servidor DHCP activo (no deshabilitado) ligado a una interfaz."""

    model_config = ConfigDict(frozen=True)

    interface_name: str = Field(..., description="Interfaz donde escucha el servidor DHCP.")
    pool_name: str = Field(
        default="",
        description="Pool asignado; vacío si el servidor no tiene pool.",
    )


class PoolUsageRecord(BaseModel):
    """Unidad pública de resultado: uso de un pool por interfaz.

    Por qué alias en mayúscula:
    - Los consumidores existentes leen `Interface`/`Used`/`Size`; el modelo
      conserva esos nombres en la salida estructurada.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    interface: str = Field(..., alias="Interface", description="Interfaz del servidor DHCP.")
    used: int = Field(..., ge=0, alias="Used", description="Direcciones actualmente asignadas.")
    size: int = Field(..., alias="Size", description="Capacidad total del pool.")

    @property
    def free(self) -> int:
        """Derived, never stored. Negative when the pool is over-subscribed."""

        return self.size - self.used
