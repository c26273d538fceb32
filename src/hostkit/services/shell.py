"""ShellService — quoting arguments for a remote POSIX shell."""

from __future__ import annotations

from hostkit.domain.quoting import escape_arg, join_args
from hostkit.services.base import BaseService
from hostkit.services.result import ServiceResult


class ShellService(BaseService):
    """Build shell-safe command lines."""

    def escape(self, args: list[str]) -> ServiceResult:
        """Quote each of *args* and join them into one command line."""
        return ServiceResult(
            ok=True,
            op="escape",
            data={
                "command": join_args(args),
                "escaped": [escape_arg(arg) for arg in args],
            },
        )
