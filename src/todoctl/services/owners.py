"""OwnerService: owner registration."""

from __future__ import annotations

import logging

from todoctl.domain.models import Owner
from todoctl.services.base import BaseService

logger = logging.getLogger(__name__)


class OwnerService(BaseService):
    """Use cases for owners."""

    def create_owner(self, name: str, role: str) -> Owner:
        """Register a new owner under a freshly generated id.

        Errors raised by the repository's ``save`` propagate unchanged.
        """
        owner = Owner(id=self._tracker.next_id("owner"), name=name, role=role)
        self._tracker.owners.save(owner)
        logger.info("owner_created", extra={"owner_id": owner.id, "role": owner.role})
        return owner
