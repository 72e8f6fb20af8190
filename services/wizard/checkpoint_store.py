# -*- coding: utf-8 -*-
"""
Checkpoint persistence for in-progress wizards.

A checkpoint is the JSON text {"formData": {...}, "step": n} stored under
one key per wizard variant. Anything missing, unparsable or out of shape
loads as "no checkpoint" so the wizard simply starts fresh.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.field_schema import FormSchema
from repositories.local_storage import KeyValueStorage
from services.exceptions import StorageException
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Checkpoint:
    """Snapshot of answers and current step."""
    answers: Dict[str, Any]
    step: int

    def to_dict(self) -> Dict[str, Any]:
        return {"formData": self.answers, "step": self.step}


class CheckpointStore:
    """Loads, saves and clears the checkpoint of one wizard variant."""

    def __init__(self, storage: KeyValueStorage, key: str,
                 schema: FormSchema, total_steps: int):
        """
        Args:
            storage: Key-value storage backend
            key: Storage key reserved for this wizard variant
            schema: Field schema used to sanitize restored answers
            total_steps: Upper bound for a restorable step
        """
        self.storage = storage
        self.key = key
        self.schema = schema
        self.total_steps = total_steps

    def load(self) -> Optional[Checkpoint]:
        """
        Restore the checkpoint, or None if there is no usable one.

        Never raises: storage failures and malformed payloads are logged
        and reported as absent.
        """
        try:
            raw = self.storage.get_item(self.key)
        except StorageException as e:
            logger.warning(f"Cannot read checkpoint {self.key}: {e}")
            return None

        if raw is None:
            return None

        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Discarding corrupt checkpoint {self.key}: {e}")
            return None

        return self._parse(payload)

    def _parse(self, payload: Any) -> Optional[Checkpoint]:
        if not isinstance(payload, dict):
            logger.warning(f"Discarding checkpoint {self.key}: not an object")
            return None

        form_data = payload.get("formData")
        if form_data is None:
            form_data = {}
        elif not isinstance(form_data, dict):
            logger.warning(f"Discarding checkpoint {self.key}: formData is not an object")
            return None

        step = payload.get("step")
        # bool is an int subclass; a JSON true/false is not a step
        if isinstance(step, bool) or not isinstance(step, (int, type(None))):
            logger.warning(f"Discarding checkpoint {self.key}: invalid step {step!r}")
            return None
        if not step:
            step = 1
        if not 1 <= step <= self.total_steps:
            logger.warning(f"Discarding checkpoint {self.key}: step {step} out of range")
            return None

        return Checkpoint(answers=self.schema.normalize(form_data), step=step)

    def save(self, answers: Dict[str, Any], step: int) -> None:
        """
        Write the checkpoint.

        Raises:
            StorageException: if the backend cannot store it
        """
        text = json.dumps(Checkpoint(answers, step).to_dict())
        self.storage.set_item(self.key, text)
        logger.debug(f"Checkpoint saved: {self.key} (step {step})")

    def clear(self) -> None:
        """Delete the checkpoint. Clearing an absent checkpoint is a no-op."""
        self.storage.remove_item(self.key)
        logger.debug(f"Checkpoint cleared: {self.key}")
