"""BaseService — foundation for all realmctl services.

Every service receives a :class:`Workspace` at construction time. Domain
code raises :class:`RealmctlError` subclasses; services convert them to
failed :class:`ServiceResult` values at the boundary so callers never see
raw exceptions for user mistakes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from realmctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from realmctl.domain.errors import RealmctlError
    from realmctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RealmService(BaseService):
            def save(self, text: str) -> ServiceResult:
                try:
                    directory = self._workspace.realms.save(text)
                except RealmctlError as exc:
                    return self._failure("save_realms", exc)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @staticmethod
    def _failure(op: str, exc: RealmctlError) -> ServiceResult:
        """Build the failed result for a domain error."""
        logger.debug("%s failed: %s (%s)", op, exc.code, exc.reason)
        detail = {"reason": exc.reason} if exc.reason else {}
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=detail),
        )
