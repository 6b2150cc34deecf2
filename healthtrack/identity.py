# -*- coding: utf-8 -*-
"""Caller identity for the HTTP layer.

Authentication is handled in front of this service; requests arrive with the
already-verified user id in the ``X-User-Id`` header.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException

USER_ID_HEADER = "X-User-Id"


def get_current_user_id(x_user_id: Optional[str] = Header(default=None, alias=USER_ID_HEADER)) -> str:
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id
