"""Pool statistics exception classes."""

from __future__ import annotations


class PoolStatsError(Exception):
    """Base exception for pool statistics collection."""

    pass


class ConfigurationError(PoolStatsError):
    """Local configuration is unusable (missing username, bad router address)."""

    pass


class QueryError(PoolStatsError):
    """The router could not complete a request (network, auth or protocol)."""

    def __init__(
        self,
        message: str,
        *,
        context: str | None = None,
        pool_name: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.pool_name = pool_name

    def with_context(self, context: str, *, pool_name: str | None = None) -> "QueryError":
        """Return a copy of this error tagged with the step that failed."""

        return type(self)(self.message, context=context, pool_name=pool_name)

    def __str__(self) -> str:
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message


class ConnectError(QueryError):
    """Login probe against the router failed."""

    pass


class FormatError(PoolStatsError):
    """A pool range list could not be parsed into numeric bounds."""

    def __init__(self, message: str, *, value: str, pool_name: str | None = None):
        self.message = message
        self.value = value
        self.pool_name = pool_name
        super().__init__(f"{message}: {value!r}")

    def for_pool(self, pool_name: str) -> "FormatError":
        return FormatError(self.message, value=self.value, pool_name=pool_name)
