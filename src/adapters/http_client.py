"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, auth, verificación TLS y URL base de la API REST.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.errors import ConfigurationError


def build_base_url(host: str, settings: AppSettings) -> httpx.URL:
    """URL base de la API REST de RouterOS (`{scheme}://host:port/rest`).

    Un host vacío o que no forma una URL válida es un error de configuración.
    """

    host = host.strip()
    if not host or "/" in host:
        raise ConfigurationError(f"invalid host {host!r}")
    if host.count(":") > 1 and not host.startswith("["):
        # Bare IPv6 literal.
        host = f"[{host}]"
    try:
        url = httpx.URL(f"{settings.scheme}://{host}:{settings.effective_port}/rest")
    except httpx.InvalidURL as exc:
        raise ConfigurationError(str(exc)) from exc
    if not url.host:
        raise ConfigurationError(f"invalid host {host!r}")
    return url


def build_client(
    host: str,
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros para el router.

    Por qué un builder:
    - Centraliza timeouts/credenciales para que todas las consultas se
      comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    return httpx.Client(
        base_url=build_base_url(host, settings),
        auth=httpx.BasicAuth(settings.username, settings.password),
        timeout=httpx.Timeout(settings.timeout_seconds),
        verify=settings.verify_tls,
        headers={"Accept": "application/json"},
        transport=transport,
    )
