"""PathService — directory probing and creation ahead of file writes."""

from __future__ import annotations

from hostkit.infrastructure.filesystem import (
    basename,
    directory_exists,
    mkdirs,
    prepare_file,
)
from hostkit.services.base import BaseService
from hostkit.services.result import ServiceError, ServiceResult


class PathService(BaseService):
    """Filesystem operations, reported as ServiceResults."""

    def directory_exists(self, path: str) -> ServiceResult:
        """Report whether *path* is a real (non-link) directory."""
        return ServiceResult(
            ok=True,
            op="isdir",
            data={"directory": directory_exists(path), "path": path},
        )

    def mkdirs(self, path: str) -> ServiceResult:
        """Create the parent directories of *path*."""
        if not mkdirs(path, mode=self._settings.files.dir_mode):
            return ServiceResult(
                ok=False,
                op="mkdirs",
                error=ServiceError(
                    code="MKDIRS_FAILED",
                    message=f"Cannot create parent directories of {path}",
                    detail={"path": path},
                ),
            )
        return ServiceResult(ok=True, op="mkdirs", data={"path": path})

    def basename(self, path: str) -> ServiceResult:
        """Return the final component of *path*."""
        return ServiceResult(ok=True, op="basename", data={"name": basename(path)})

    def prepare_file(self, path: str) -> ServiceResult:
        """Create *path* as an empty file, making its parents first."""
        files = self._settings.files
        if not prepare_file(path, dir_mode=files.dir_mode, file_mode=files.file_mode):
            return ServiceResult(
                ok=False,
                op="touch",
                error=ServiceError(
                    code="CREATE_FAILED",
                    message=f"Cannot create {path}",
                    detail={"path": path},
                ),
            )
        return ServiceResult(ok=True, op="touch", data={"path": path})
