"""Cost ledger service: the single entry point for new cost entries."""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Optional

import pytz

from cost_tracker.core.exceptions import ValidationError, NotFoundError
from cost_tracker.core.parsing import (
    parse_category,
    parse_decimal,
    parse_int,
    parse_timestamp,
    require_text,
)
from cost_tracker.core.timezone import Clock, get_ledger_tz, now_local
from cost_tracker.domain.models import CostEntry
from cost_tracker.repositories.protocols import CostRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass
class CostCreate:
    """Raw input for admitting a cost; values are validated by the service."""

    description: Any = None
    category: Any = None
    owner_id: Any = None
    amount: Any = None
    occurred_at: Any = None


class CostLedgerService:
    """
    Gatekeeper for the cost ledger.

    Rejects malformed input, unknown owners and backdated entries before any
    write happens. Refusing occurred_at < now is what lets the report engine
    cache closed months forever. Never touches the report cache.
    """

    def __init__(
        self,
        cost_repo: CostRepository,
        user_repo: UserRepository,
        clock: Clock = now_local,
        tz: Optional[pytz.BaseTzInfo] = None,
    ):
        self._cost_repo = cost_repo
        self._user_repo = user_repo
        self._clock = clock
        self._tz = tz or get_ledger_tz()

    def admit(self, data: CostCreate) -> CostEntry:
        """
        Validate and append a new cost entry.

        Raises:
            ValidationError: malformed field or occurred_at earlier than now
            NotFoundError: no user with owner_id
            StoreError: the ledger insert failed
        """
        description = require_text(data.description, "description")
        category = parse_category(data.category)
        owner_id = parse_int(data.owner_id, "ownerId")
        amount = parse_decimal(data.amount, "amount")

        now = self._clock()
        if data.occurred_at is None or data.occurred_at == "":
            occurred_at = now.astimezone(self._tz)
        else:
            occurred_at = parse_timestamp(data.occurred_at, "occurredAt", self._tz)

        if occurred_at < now:
            raise ValidationError("cannot add costs with past dates")

        if not self._user_repo.exists(owner_id):
            raise NotFoundError("User", owner_id)

        entry = CostEntry(
            cost_id=uuid.uuid4().hex,
            description=description,
            category=category,
            owner_id=owner_id,
            amount=amount,
            occurred_at=occurred_at,
        )
        created = self._cost_repo.create(entry)
        logger.info(
            "Admitted cost %s for owner %s (%s, %s)",
            created.cost_id, owner_id, category.value, amount,
        )
        return created

