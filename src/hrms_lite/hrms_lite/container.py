from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import requests

from .api.client import HrApiClient
from .api.connection import ApiConfig, HttpConnection
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS
from .view.controller import ViewController
from .view.registry import ScreenRegistry


@dataclass(frozen=True)
class Container:
    conn: Optional[HttpConnection]
    api_client: HrApiClient
    screens: ScreenRegistry

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()


def build_container(
    *,
    api_config: dict,
    alert: Optional[Callable[[str], None]] = None,
    session: Optional[requests.Session] = None,
) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT_SECONDS)),
    )
    conn = HttpConnection(config, session=session)
    api_client = HrApiClient(conn)
    screens = ScreenRegistry(lambda: ViewController(api_client, api_client, alert=alert))

    return Container(
        conn=conn,
        api_client=api_client,
        screens=screens,
    )
