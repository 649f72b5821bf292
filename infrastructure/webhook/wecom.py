"""WeCom (WeChat Work) group-robot implementation of AlertProvider.

- one POST per alert, JSON markdown message, no retries
- per-group webhook overrides, first matching override wins
- the "update time" line is rendered in an explicit fixed-offset zone
  (UTC+8 unless told otherwise) from an injectable clock
"""

from datetime import datetime, timezone
from typing import Any, Callable, Optional
from urllib.parse import urlsplit

import httpx

from errors import DeliveryError, TransportError
from infrastructure.http_client import HttpClient
from schemas.dto.wecom import MarkdownMessage
from schemas.models.alert import Alert
from schemas.models.alert_provider import WeComProviderConfig
from schemas.models.endpoint import Endpoint
from schemas.models.result import Result
from shared.datetime_utils import UTC8, format_in_zone, utc_now
from shared.logging import get_logger

log = get_logger(__name__)

RESOLVED_TITLE = '# <font color="info">Alert Resolved</font>\n'
TRIGGERED_TITLE = '# <font color="warning">Alert Triggered</font>\n'
SUCCESS_PREFIX = "✅"
FAILURE_PREFIX = "❌"


def _webhook_host(url: str) -> str:
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""


class WeComAlertProvider:
    def __init__(
        self,
        config: WeComProviderConfig,
        http_client: HttpClient,
        *,
        tz: timezone = UTC8,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._config = config
        self._http = http_client
        self._tz = tz
        self._clock = clock

    @property
    def config(self) -> WeComProviderConfig:
        return self._config

    def is_valid(self) -> bool:
        return self._config.is_valid()

    def get_default_alert(self) -> Optional[Alert]:
        return self._config.default_alert

    def webhook_url_for_group(self, group: str) -> str:
        return self._config.webhook_url_for_group(group)

    def build_message(
        self,
        endpoint: Endpoint,
        alert: Optional[Alert],
        result: Result,
        resolved: bool,
    ) -> str:
        title = RESOLVED_TITLE if resolved else TRIGGERED_TITLE

        description = alert.get_description() if alert is not None else ""
        info = "## Endpoint Info\n"
        info += f'> group: <font color="comment">{endpoint.group}</font>\n'
        info += f'> name: <font color="comment">{endpoint.name}</font>\n'
        info += f"> url: [{endpoint.url}]({endpoint.url})\n"
        info += f'> describe: <font color="comment">{description}</font>\n'
        info += f"> update time: {format_in_zone(self._clock(), self._tz)}\n\n"

        conditions = "## Condition:\n"
        for condition_result in result.condition_results:
            prefix = SUCCESS_PREFIX if condition_result.success else FAILURE_PREFIX
            conditions += f"{prefix} - `{condition_result.condition}`\n"

        return title + info + conditions

    def build_request_body(
        self,
        endpoint: Endpoint,
        alert: Optional[Alert],
        result: Result,
        resolved: bool,
    ) -> dict[str, Any]:
        message = self.build_message(endpoint, alert, result, resolved)
        return MarkdownMessage.from_text(message).model_dump()

    async def send(
        self,
        endpoint: Endpoint,
        alert: Optional[Alert],
        result: Result,
        resolved: bool,
    ) -> None:
        """Deliver one alert.

        Raises:
            TransportError: the request could not be built or sent.
            DeliveryError: the webhook answered with a status >= 400.
        """
        url = self.webhook_url_for_group(endpoint.group)
        body = self.build_request_body(endpoint, alert, result, resolved)
        context = dict(
            group=endpoint.group,
            endpoint=endpoint.name,
            resolved=resolved,
            webhook_host=_webhook_host(url),
        )
        try:
            response = await self._http.post(
                url,
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.warning(
                "wecom_alert_transport_failed",
                error=str(e),
                error_type=type(e).__name__,
                **context,
            )
            raise TransportError(
                f"failed to call provider alert: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        if response.status_code > 399:
            log.warning(
                "wecom_alert_rejected",
                status_code=response.status_code,
                response_text=response.text[:200],
                **context,
            )
            raise DeliveryError(response.status_code, response.text)

        log.info("wecom_alert_sent", status_code=response.status_code, **context)
