"""
Administrator gate.

``check_admin`` returns a verdict instead of raising so that callers can
forward its status code and message unchanged.  API views return them
as JSON; pages render them through ``admin_required``.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Optional

from django.shortcuts import render

from .models import User

AUTH_REQUIRED_MESSAGE = '인증이 필요합니다.'
ADMIN_REQUIRED_MESSAGE = '관리자 권한이 필요합니다.'


@dataclass(frozen=True)
class AdminCheck:
    authorized: bool
    error: Optional[str] = None
    status: Optional[int] = None


def check_admin(user) -> AdminCheck:
    if not (user and getattr(user, 'is_authenticated', False)):
        return AdminCheck(False, AUTH_REQUIRED_MESSAGE, 401)
    if getattr(user, 'role', None) != User.ROLE_ADMIN:
        return AdminCheck(False, ADMIN_REQUIRED_MESSAGE, 403)
    return AdminCheck(True)


def admin_required(view):
    """Page decorator: render the denial page unless the user is an admin."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        verdict = check_admin(request.user)
        if not verdict.authorized:
            return render(
                request,
                'directory/admin/denied.html',
                {'error': verdict.error},
                status=verdict.status,
            )
        return view(request, *args, **kwargs)
    return wrapper
