"""
Plugin system domain models.

These models define the data returned by plugin actions to the host.
"""
from typing import Any, Optional

from pydantic import BaseModel

__all__ = ["ActionResult"]


class ActionResult(BaseModel):
    """Result from executing an action."""
    status: str = "success"  # success or error
    result: Optional[Any] = None
    message: Optional[str] = None
