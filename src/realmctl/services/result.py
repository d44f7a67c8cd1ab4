"""Result envelope returned by every realmctl service call.

Commands and the interactive loop never see domain exceptions; they get a
:class:`ServiceResult` and decide between stdout and stderr from ``ok``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is the stable error name (``INVALID_MULTIPLIER`` ...),
    ``message`` the text shown to the user and ``detail`` the parser
    complaint behind it, if any.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation such as ``multiply`` or ``save_realms``.

    For ``multiply``, ``send_donkeys`` and ``export_realms`` the ``data``
    payload is the JSON document itself; ``meta`` records the factor,
    routing or capacity that produced it.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
