"""Tagged result returned by every order API operation"""

from dataclasses import dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class Success:
    """Operation succeeded; data is the response payload"""
    data: Any = None

    success: ClassVar[bool] = True
    error: ClassVar[None] = None

    def to_dict(self) -> dict[str, Any]:
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class Failure:
    """Operation failed; error is a user-presentable message"""
    error: str

    success: ClassVar[bool] = False
    data: ClassVar[None] = None

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.error}


Result = Union[Success, Failure]
