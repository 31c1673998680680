from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog.auth import Credentials
from ..context import get_auth_stub

if TYPE_CHECKING:
    from ..mutations.root import LoginInput
    from ..types.auth import Tokens


async def resolve_login(info: strawberry.Info, data: LoginInput | None) -> Tokens:
    from ..types.auth import Tokens as TokensType

    credentials = Credentials(
        email=data.email if data else None,
        password=data.password if data else None,
    )
    tokens = get_auth_stub(info).login(credentials)
    return TokensType(access_token=tokens.access_token)
