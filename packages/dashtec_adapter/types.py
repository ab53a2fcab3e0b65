from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict

class SectionStatus(str, Enum):
    OK = "ok"
    UNAVAILABLE = "unavailable"
    ACCESS_DENIED = "access_denied"
    MALFORMED = "malformed"

class Fetched(BaseModel):
    """Outcome of one endpoint request; payload is set only when status is OK."""
    model_config = ConfigDict(frozen=True)

    kind: str
    status: SectionStatus
    status_code: Optional[int] = None
    payload: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is SectionStatus.OK
