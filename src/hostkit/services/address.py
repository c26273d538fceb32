"""AddressService — connection string parsing."""

from __future__ import annotations

from hostkit.domain.address import ParseError, parse_host_and_port
from hostkit.services.base import BaseService
from hostkit.services.result import ServiceError, ServiceResult


class AddressService(BaseService):
    """Turn user-typed ``host[:port]`` strings into endpoints."""

    def parse(self, address: str, *, default_port: int | None = None) -> ServiceResult:
        """Parse *address*, falling back to the configured default port."""
        port = self._settings.network.default_port if default_port is None else default_port
        parsed = parse_host_and_port(address, port)
        if isinstance(parsed, ParseError):
            return ServiceResult(
                ok=False,
                op="parse",
                error=ServiceError(
                    code=parsed.code.value,
                    message=parsed.message,
                    detail={"address": address},
                ),
            )
        return ServiceResult(
            ok=True,
            op="parse",
            data={
                "canonical_address": parsed.canonical_address,
                "host": parsed.host,
                "port": parsed.port,
            },
        )
