"""
Allocation Gateway
Create / update / delete requests against the /allocations resource.
No retries: a repeated create may duplicate a record.
"""
import logging
from typing import Any, Dict, Optional

from ..api import ApiClient
from .models import PersistedAllocation

logger = logging.getLogger(__name__)

ALLOCATIONS_ENDPOINT = '/allocations'


class AllocationGateway:
    """Remote persistence for allocation records"""

    def __init__(self, client: ApiClient, endpoint: str = ALLOCATIONS_ENDPOINT):
        self.client = client
        self.endpoint = endpoint

    @staticmethod
    def _to_allocation(body: Any) -> Optional[PersistedAllocation]:
        # Some backends answer writes with an empty body
        if not isinstance(body, dict):
            return None
        return PersistedAllocation.from_dict(body)

    def create(self, payload: Dict[str, Any]) -> Optional[PersistedAllocation]:
        body = self.client.post(self.endpoint, payload)
        allocation = self._to_allocation(body)
        logger.info(f"Created allocation {allocation.id if allocation else '(no body)'}")
        return allocation

    def update(self, allocation_id: int, payload: Dict[str, Any]) -> Optional[PersistedAllocation]:
        body = self.client.put(f"{self.endpoint}/{allocation_id}", payload)
        logger.info(f"Updated allocation {allocation_id}")
        return self._to_allocation(body)

    def delete(self, allocation_id: int) -> None:
        self.client.delete(f"{self.endpoint}/{allocation_id}")
        logger.info(f"Deleted allocation {allocation_id}")
