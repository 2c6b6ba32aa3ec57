"""Team information service."""

import logging
from typing import Iterable

from cost_tracker.config.settings import TeamMember
from cost_tracker.domain.models import Developer
from cost_tracker.repositories.protocols import DeveloperRepository

logger = logging.getLogger(__name__)


class AboutService:
    """Serves the developer roster."""

    def __init__(self, developer_repo: DeveloperRepository):
        self._developer_repo = developer_repo

    def list_developers(self) -> list[Developer]:
        return self._developer_repo.list_all()

    def seed_developers(self, members: Iterable[TeamMember]) -> int:
        """Insert configured members if the roster is empty; return how many."""
        if self._developer_repo.count() > 0:
            return 0
        added = 0
        for member in members:
            self._developer_repo.create(
                Developer(first_name=member.first_name.strip(), last_name=member.last_name.strip())
            )
            added += 1
        if added:
            logger.info("Seeded %d developers", added)
        return added
