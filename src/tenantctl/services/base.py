"""BaseService: shared foundation for the store-backed services.

Every service receives a :class:`KVStore` at construction time and
translates store failures into classified errors at its own boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from tenantctl.domain.errors import ClassifiedError
from tenantctl.infrastructure.kv import StoreUnavailableError

if TYPE_CHECKING:
    from tenantctl.infrastructure.kv import KVStore

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for store-backed services.

    Usage::

        class OrganizationStoreService(BaseService):
            def delete_organization(self, org_id: str) -> None:
                with self._store_errors(unavailable_org_service_error):
                    ...
    """

    def __init__(self, store: KVStore) -> None:
        self._store = store

    @contextmanager
    def _store_errors(
        self, unavailable: Callable[[BaseException], ClassifiedError]
    ) -> Generator[None]:
        """Re-raise store failures inside the block as *unavailable* errors."""
        try:
            yield
        except StoreUnavailableError as exc:
            logger.debug("Store unavailable: %s", exc)
            raise unavailable(exc) from exc
