"""Key-value persistence for submission records.

A store maps a submission id to a JSON-serialized record inside a
namespace. It knows nothing about forms or the dashboard; callers pass
plain dicts in and get plain dicts back, in no particular order.
"""

import json
import logging
import threading

from django.core.serializers.json import DjangoJSONEncoder
from django.db import DatabaseError, transaction
from django.utils.module_loading import import_string

from .config import IntakeConfig
from .constants import DEFAULT_NAMESPACE
from .exceptions import StoreUnavailable
from .models import SubmissionRecord

logger = logging.getLogger(__name__)


def _dumps(record: dict) -> str:
    return json.dumps(record, cls=DjangoJSONEncoder)


class SubmissionStore:
    """Interface shared by all store backends."""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        self.namespace = namespace

    def put(self, key: str, record: dict) -> None:
        """Write or overwrite ``record`` under ``key``. Last writer wins."""
        raise NotImplementedError

    def get(self, key: str) -> dict | None:
        """Return the record under ``key``, or None."""
        raise NotImplementedError

    def get_all(self) -> list[dict]:
        """Return every record in the namespace, unordered."""
        raise NotImplementedError


class DatabaseSubmissionStore(SubmissionStore):
    """Store backed by ``SubmissionRecord`` rows in the default database."""

    def put(self, key: str, record: dict) -> None:
        value = _dumps(record)
        try:
            with transaction.atomic():
                SubmissionRecord.objects.update_or_create(
                    namespace=self.namespace,
                    key=key,
                    defaults={"value": value},
                )
        except DatabaseError as exc:
            logger.exception("Failed to write %s/%s", self.namespace, key)
            raise StoreUnavailable("Submission store is unavailable") from exc

    def get(self, key: str) -> dict | None:
        try:
            row = SubmissionRecord.objects.filter(namespace=self.namespace, key=key).first()
        except DatabaseError as exc:
            logger.exception("Failed to read %s/%s", self.namespace, key)
            raise StoreUnavailable("Submission store is unavailable") from exc
        return json.loads(row.value) if row else None

    def get_all(self) -> list[dict]:
        try:
            values = list(SubmissionRecord.objects.filter(namespace=self.namespace).values_list("value", flat=True))
        except DatabaseError as exc:
            logger.exception("Failed to list %s", self.namespace)
            raise StoreUnavailable("Submission store is unavailable") from exc
        return [json.loads(value) for value in values]


# Process-local blobs shared by every LocMemSubmissionStore with the same namespace.
_locmem_blobs: dict[str, dict[str, str]] = {}
_locmem_lock = threading.Lock()


class LocMemSubmissionStore(SubmissionStore):
    """In-process store for development and tests. Not shared across workers."""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        super().__init__(namespace)
        with _locmem_lock:
            self._blobs = _locmem_blobs.setdefault(namespace, {})

    def put(self, key: str, record: dict) -> None:
        value = _dumps(record)
        with _locmem_lock:
            self._blobs[key] = value

    def get(self, key: str) -> dict | None:
        with _locmem_lock:
            value = self._blobs.get(key)
        return json.loads(value) if value is not None else None

    def get_all(self) -> list[dict]:
        with _locmem_lock:
            values = list(self._blobs.values())
        return [json.loads(value) for value in values]

    def clear(self) -> None:
        with _locmem_lock:
            self._blobs.clear()


def build_store(config: IntakeConfig) -> SubmissionStore:
    """Instantiate the configured store backend for the configured namespace."""
    backend = import_string(config.store_backend)
    return backend(namespace=config.store_namespace)
