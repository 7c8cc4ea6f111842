"""HTTP helpers: JSON POST wrappers around httpx.AsyncClient."""

from objext.http.client import ErrorHook, SuccessHook, create_client, execute_post, post_as

__all__ = [
    "create_client",
    "execute_post",
    "post_as",
    "SuccessHook",
    "ErrorHook",
]
