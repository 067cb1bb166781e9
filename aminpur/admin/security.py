# aminpur/admin/security.py
from fastapi import HTTPException, Request, status

from ..config import settings

SESSION_FLAG = "is_admin"


def check_credentials(username: str, password: str) -> bool:
    """
    Exact match against the single configured pair.
    Only a gate for the admin screens, not an auth system.
    """
    return username == settings.ADMIN_USERNAME and password == settings.ADMIN_PASSWORD


def is_admin_session(request: Request) -> bool:
    sess = getattr(request, "session", None) or {}
    return bool(sess.get(SESSION_FLAG))


def require_admin(request: Request) -> bool:
    if not is_admin_session(request):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="admin only")
    return True
