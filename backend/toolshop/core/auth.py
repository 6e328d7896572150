"""
Session guards for the Toolshop API
Provides user context from the store session to protected routes
"""
from fastapi import Depends, HTTPException, status

from toolshop.core.store import ShopStore, get_store
from toolshop.domain.user import User


def get_current_user(store: ShopStore = Depends(get_store)) -> User:
    """
    Dependency for routes that need a signed-in customer

    Raises:
        HTTPException 401: nobody is signed in
    """
    if store.session.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please sign in first",
        )
    return store.session.user


def require_admin(store: ShopStore = Depends(get_store)) -> ShopStore:
    """
    Dependency for admin console routes

    Raises:
        HTTPException 403: the session is not an admin session
    """
    if not store.session.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return store
