"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (Pydantic v2) y la
  jerarquía de errores del pipeline.
- El dominio no conoce HTTP, CLI ni RouterOS: solo pools, rangos y uso.
"""
