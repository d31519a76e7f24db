"""Contrato del colaborador de consultas al router.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El Core solo emite lecturas filtradas/proyectadas; el adaptador concreto
  (REST, API binaria, un fake en tests) decide autenticación y transporte.
"""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RouterQuery(Protocol):
    """Canal autenticado de petición/respuesta contra el router.

    Reglas de diseño:
    - `query` es síncrono: una petición a la vez, en orden estricto.
    - Los filtros son de igualdad exacta (`campo=valor`).
    - Devuelve filas como mapas `campo -> str`, en el orden del router.
    - Un fallo de transporte/autenticación se señala con `QueryError`.
    """

    def query(
        self,
        path: str,
        filters: Mapping[str, str],
        fields: Sequence[str],
    ) -> list[dict[str, str]]:
        """Lee `path` filtrando por `filters` y proyectando solo `fields`."""

        ...
