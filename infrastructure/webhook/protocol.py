"""AlertProvider protocol. The alert dispatch engine depends on this, not on WeCom."""

from typing import Optional, Protocol, runtime_checkable

from schemas.models.alert import Alert
from schemas.models.endpoint import Endpoint
from schemas.models.result import Result


@runtime_checkable
class AlertProvider(Protocol):
    def is_valid(self) -> bool: ...

    def get_default_alert(self) -> Optional[Alert]: ...

    async def send(
        self,
        endpoint: Endpoint,
        alert: Optional[Alert],
        result: Result,
        resolved: bool,
    ) -> None: ...
