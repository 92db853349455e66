import json
import logging
from typing import Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from flockweigh.core.config import settings
from flockweigh.core.errors import WeighingNotFoundError, WeighingStoreError
from flockweigh.db.store import KeyValueStore
from flockweigh.models.batch import Batch
from flockweigh.models.weighing import WeighingEvent
from flockweigh.schemas.weighing_request import WeighingRecordCreate
from flockweigh.services.clock import Moment
from flockweigh.services.recording import record_weighing
from flockweigh.services.schedule import generate_schedule_for_batch
from flockweigh.services.upcoming import upcoming_weighings

logger = logging.getLogger(__name__)

_events_adapter = TypeAdapter(List[WeighingEvent])


class WeighingRepository:
    """
    Keeps each batch's weighing schedule as a JSON array under
    `{key_prefix}:{batch_id}` in a key-value store.
    """

    def __init__(self, store: KeyValueStore, key_prefix: Optional[str] = None):
        self._store = store
        self._key_prefix = key_prefix or settings.STORE_KEY_PREFIX

    def _key(self, batch_id: str) -> str:
        return f"{self._key_prefix}:{batch_id}"

    def _read(self, batch_id: str) -> Optional[List[WeighingEvent]]:
        """
        Parses the stored schedule of a batch, or returns None when nothing is
        stored under its key.

        Raises:
            WeighingStoreError: If the stored value is not a JSON array or any
                entry fails validation.
        """
        key = self._key(batch_id)
        raw = self._store.get(key)
        if raw is None:
            return None

        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Stored schedule '{key}' is not valid JSON: {e}")
            raise WeighingStoreError(f"Stored schedule '{key}' is not valid JSON: {e}") from e
        if not isinstance(items, list):
            logger.error(f"Stored schedule '{key}' is not a JSON array.")
            raise WeighingStoreError(f"Stored schedule '{key}' is not a JSON array.")

        events = []
        malformed_count = 0
        for item in items:
            try:
                events.append(WeighingEvent.model_validate(item))
            except ValidationError as e:
                malformed_count += 1
                logger.warning(f"Malformed weighing for batch '{batch_id}'. Reason: {e}")

        if malformed_count > 0:
            logger.error(
                f"Found {malformed_count} malformed weighings for batch '{batch_id}'."
            )
            raise WeighingStoreError(
                f"Stored schedule '{key}' has {malformed_count} malformed weighings."
            )
        return events

    def load(self, batch_id: str) -> List[WeighingEvent]:
        """
        Returns the stored schedule of a batch, or an empty list.

        Raises:
            WeighingStoreError: If the stored schedule cannot be parsed.
        """
        return self._read(batch_id) or []

    def save(self, batch_id: str, events: Iterable[WeighingEvent]) -> None:
        payload = _events_adapter.dump_json(list(events), by_alias=True)
        self._store.set(self._key(batch_id), payload.decode("utf-8"))

    def ensure_schedule(
        self, batch: Batch, now: Optional[Moment] = None
    ) -> List[WeighingEvent]:
        """
        Returns the batch's schedule, generating and storing it when nothing
        is stored for the batch yet.
        """
        events = self._read(batch.id)
        if events is not None:
            return events

        logger.info(f"No weighing schedule stored for batch '{batch.id}'. Generating one.")
        events = generate_schedule_for_batch(batch, now=now)
        self.save(batch.id, events)
        return events

    def record(
        self,
        batch_id: str,
        week: int,
        record: WeighingRecordCreate,
        now: Optional[Moment] = None,
    ) -> WeighingEvent:
        """
        Records a measurement on the stored weighing for `week`.

        Raises:
            WeighingNotFoundError: If the batch has no weighing for that week.
            WeighingStoreError: If the stored schedule cannot be parsed.
        """
        events = self.load(batch_id)
        for index, event in enumerate(events):
            if event.week == week:
                updated = record_weighing(event, record, now=now)
                events[index] = updated
                self.save(batch_id, events)
                return updated

        raise WeighingNotFoundError(batch_id, week)

    def upcoming(
        self,
        batch_ids: Iterable[str],
        lookahead_days: Optional[int] = None,
        now: Optional[Moment] = None,
    ) -> List[WeighingEvent]:
        """Pending weighings of several batches due within the lookahead window."""
        events: List[WeighingEvent] = []
        for batch_id in batch_ids:
            events.extend(self.load(batch_id))
        return upcoming_weighings(events, lookahead_days=lookahead_days, now=now)
