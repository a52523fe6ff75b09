"""Function key authorization for public endpoints."""

from __future__ import annotations

import secrets
from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Query, Request, status

if TYPE_CHECKING:
    from pantry_chef.containers import AppContainer


def _get_function_key(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return container.settings.function_key


async def require_function_key(
    x_functions_key: str | None = Header(default=None),
    code: str | None = Query(default=None),
    function_key: str | None = Depends(_get_function_key),
) -> None:
    """Ensure requests carry the function key when one is configured."""
    if not function_key:
        return
    provided = x_functions_key or code
    if not provided or not secrets.compare_digest(
        provided.encode(), function_key.encode()
    ):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
