"""Iconify extractor: icons from remote Iconify collections.

The HTTP side lives in IconifyClient so it can be swapped for any object
with a ``fetch_collection_icon_ids(collection)`` method.
"""

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Protocol

import httpx
import structlog

from iconpacks.icon import IconMetadata

from .base import IconExtractor, require_list

if TYPE_CHECKING:
    from iconpacks.config.types import IconPackDefinition

API_ENDPOINT = "https://api.iconify.design"


class CollectionClient(Protocol):
    def fetch_collection_icon_ids(self, collection: str) -> list[str]: ...


class IconifyClient:
    """Minimal client for the Iconify collection API.

    Fails soft: HTTP and decoding errors are logged and an empty list is
    returned, so one broken collection never breaks a whole pack.
    """

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        endpoint: str = API_ENDPOINT,
        timeout: float = 30.0,
        logger: Any = None,
    ):
        """Initialize client.

        Args:
            http_client: httpx client to use (created lazily if None)
            endpoint: Iconify API base URL
            timeout: Request timeout in seconds
            logger: structlog-style logger
        """
        self._http_client = http_client
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.logger = logger or structlog.get_logger(__name__)
        self._lock = threading.Lock()

    @property
    def http_client(self) -> httpx.Client:
        with self._lock:
            if self._http_client is None:
                self._http_client = httpx.Client(timeout=self.timeout)
            return self._http_client

    def close(self) -> None:
        with self._lock:
            client, self._http_client = self._http_client, None
        if client is not None:
            client.close()

    def fetch_collection_icon_ids(self, collection: str) -> list[str]:
        """List icon names of one collection.

        Args:
            collection: Iconify collection prefix (e.g., "mdi")

        Returns:
            Icon names, or [] on any upstream failure
        """
        try:
            response = self.http_client.get(
                f"{self.endpoint}/collection", params={"prefix": collection}
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            kind = "client" if e.response.status_code < 500 else "server"
            self.logger.error(
                "iconify_request_failed",
                error_type=kind,
                collection=collection,
                status_code=e.response.status_code,
            )
            return []
        except httpx.HTTPError as e:
            self.logger.error(
                "iconify_request_failed",
                error_type="transport",
                collection=collection,
                error=str(e),
            )
            return []
        except ValueError as e:
            self.logger.error(
                "iconify_invalid_response", collection=collection, error=str(e)
            )
            return []

        if not isinstance(payload, dict):
            self.logger.error(
                "iconify_invalid_response", collection=collection, error=str(payload)[:200]
            )
            return []

        categories = payload.get("categories")
        if categories:
            icons = []
            for names in categories.values():
                icons.extend(names)
            return icons

        return list(payload.get("uncategorized") or [])


@dataclass(frozen=True)
class IconifyConfig:
    collections: tuple[str, ...]

    @classmethod
    def from_config(cls, extractor_id: str, config: dict) -> "IconifyConfig":
        return cls(collections=tuple(require_list(extractor_id, config, "collections")))


class IconifyExtractor(IconExtractor):
    """Provide Iconify lists of icons.

    Config schema:
    ```yaml
    extractor: iconify
    config:
      collections:
        - mdi
        - ph
    ```
    """

    extractor_id = "iconify"
    label = "Iconify"
    description = "Provide Iconify list of icons."

    def __init__(self, client: Optional[CollectionClient] = None, logger: Any = None):
        super().__init__(logger)
        self.client = client or IconifyClient(logger=self.logger)

    def close(self) -> None:
        close = getattr(self.client, "close", None)
        if close is not None:
            close()

    @property
    def endpoint(self) -> str:
        return getattr(self.client, "endpoint", API_ENDPOINT)

    def discover_icons(self, pack: "IconPackDefinition") -> dict[str, IconMetadata]:
        config = IconifyConfig.from_config(self.extractor_id, pack.config)

        icons: dict[str, IconMetadata] = {}
        for collection in config.collections:
            try:
                icon_ids = self.client.fetch_collection_icon_ids(collection)
            except Exception as e:
                self.logger.error(
                    "iconify_collection_failed",
                    pack_id=pack.pack_id,
                    collection=collection,
                    error=str(e),
                )
                continue
            if not icon_ids:
                continue

            for icon_id in icon_ids:
                if not isinstance(icon_id, str):
                    continue
                source = f"{self.endpoint}/{collection}/{icon_id}.svg"
                self.add_icon(icons, pack, icon_id, source=source, group=collection)

        return icons
