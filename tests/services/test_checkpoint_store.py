# -*- coding: utf-8 -*-
"""
Tests for checkpoint persistence.

Tests cover:
- Save / load round trip in the {"formData", "step"} format
- Malformed payloads load as "no checkpoint"
- Clear is idempotent
- Storage failures on read are swallowed, on write are raised
"""

import json

import pytest

from repositories.local_storage import InMemoryStorage
from services.exceptions import StorageException
from services.wizard.checkpoint_store import Checkpoint, CheckpointStore
from ui.wizards.sample_request.definition import SAMPLE_REQUEST_SCHEMA

KEY = "liberator-sample-request"


@pytest.fixture
def store(memory_storage):
    return CheckpointStore(memory_storage, KEY, SAMPLE_REQUEST_SCHEMA, total_steps=3)


class BrokenStorage(InMemoryStorage):
    """Storage whose every operation fails."""

    def get_item(self, key):
        raise StorageException("Read failed", key=key)

    def set_item(self, key, value):
        raise StorageException("Write failed", key=key)


class TestRoundTrip:

    def test_missing_key_loads_nothing(self, store):
        assert store.load() is None

    def test_save_writes_form_data_and_step(self, store, memory_storage):
        answers = SAMPLE_REQUEST_SCHEMA.defaults()
        answers["fullName"] = "Jane Doe"
        store.save(answers, 2)

        payload = json.loads(memory_storage.get_item(KEY))
        assert payload["step"] == 2
        assert payload["formData"]["fullName"] == "Jane Doe"
        assert payload["formData"]["selectedProducts"] == []

    def test_round_trip(self, store):
        answers = SAMPLE_REQUEST_SCHEMA.defaults()
        answers.update({"fullName": "Jane Doe", "selectedProducts": ["adult-briefs", "foley-catheters"]})
        store.save(answers, 2)

        checkpoint = store.load()
        assert checkpoint == Checkpoint(answers=answers, step=2)

    def test_clear_is_idempotent(self, store):
        store.save(SAMPLE_REQUEST_SCHEMA.defaults(), 1)
        store.clear()
        store.clear()
        assert store.load() is None


class TestMalformed:

    @pytest.mark.parametrize("raw", [
        "{not json",
        "[]",
        "42",
        json.dumps({"formData": [], "step": 1}),
        json.dumps({"formData": {}, "step": "2"}),
        json.dumps({"formData": {}, "step": 2.0}),
        json.dumps({"formData": {}, "step": True}),
        json.dumps({"formData": {}, "step": 4}),
        json.dumps({"formData": {}, "step": -1}),
    ])
    def test_discarded(self, store, memory_storage, raw):
        memory_storage.set_item(KEY, raw)
        assert store.load() is None

    def test_missing_form_data_restores_defaults(self, store, memory_storage):
        memory_storage.set_item(KEY, json.dumps({"step": 3}))
        checkpoint = store.load()
        assert checkpoint.step == 3
        assert checkpoint.answers == SAMPLE_REQUEST_SCHEMA.defaults()

    @pytest.mark.parametrize("payload", [{"formData": {}}, {"formData": {}, "step": 0}])
    def test_missing_step_restores_first_step(self, store, memory_storage, payload):
        memory_storage.set_item(KEY, json.dumps(payload))
        assert store.load().step == 1

    def test_unknown_and_mistyped_fields_are_dropped(self, store, memory_storage):
        memory_storage.set_item(KEY, json.dumps({
            "formData": {"fullName": "Jo", "favouriteColour": "red", "sendAssortment": "yes"},
            "step": 1,
        }))
        answers = store.load().answers
        assert answers["fullName"] == "Jo"
        assert "favouriteColour" not in answers
        assert answers["sendAssortment"] is False

    def test_values_outside_options_restore_as_defaults(self, store, memory_storage):
        memory_storage.set_item(KEY, json.dumps({
            "formData": {
                "fullName": "Jo",
                "insuranceProvider": "bogus-plan",
                "selectedProducts": ["adult-briefs", "not-a-product"],
            },
            "step": 2,
        }))
        answers = store.load().answers
        assert answers["fullName"] == "Jo"
        assert answers["insuranceProvider"] == ""
        assert answers["selectedProducts"] == []


class TestStorageFailures:

    def test_read_failure_loads_nothing(self):
        store = CheckpointStore(BrokenStorage(), KEY, SAMPLE_REQUEST_SCHEMA, 3)
        assert store.load() is None

    def test_write_failure_raises(self):
        store = CheckpointStore(BrokenStorage(), KEY, SAMPLE_REQUEST_SCHEMA, 3)
        with pytest.raises(StorageException):
            store.save(SAMPLE_REQUEST_SCHEMA.defaults(), 1)
