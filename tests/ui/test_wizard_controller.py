# -*- coding: utf-8 -*-
"""
Tests for the wizard controller state machine.

Tests cover:
- Validation gating of advance()
- Back navigation
- Submission and close/reset
- Checkpoint restore across sessions
- Assortment / product exclusivity
"""

import json

import pytest

from repositories.local_storage import InMemoryStorage
from services.exceptions import StorageException
from ui.wizards.framework.wizard_controller import WizardController
from ui.wizards.sample_request import sample_request_definition
from ui.wizards.supply_finder import supply_finder_definition

SAMPLE_KEY = "liberator-sample-request"
FINDER_KEY = "liberator-supply-finder"


@pytest.fixture
def sample_wizard(qapp, memory_storage):
    return WizardController(sample_request_definition(), memory_storage)


@pytest.fixture
def finder_wizard(qapp, memory_storage):
    return WizardController(supply_finder_definition(), memory_storage)


def fill(controller, answers):
    for name, value in answers.items():
        controller.set_field(name, value)


def checkpoint(storage, key):
    raw = storage.get_item(key)
    return json.loads(raw) if raw is not None else None


class FailingWrites(InMemoryStorage):
    def set_item(self, key, value):
        raise StorageException("disk full", key=key)


class TestAdvance:

    def test_bad_email_blocks_step_one(self, sample_wizard):
        fill(sample_wizard, {
            "fullName": "John Smith",
            "email": "bad-email",
            "phone": "5551234567",
            "zipCode": "33101",
        })
        assert sample_wizard.advance() is False
        assert sample_wizard.get_errors() == {"email": "Please enter a valid email"}
        assert sample_wizard.current_step == 1

    def test_products_or_assortment(self, sample_wizard, contact_answers):
        fill(sample_wizard, contact_answers)
        assert sample_wizard.advance()
        assert sample_wizard.current_step == 2

        assert not sample_wizard.advance()
        assert sample_wizard.get_errors() == {
            "products": "Please select at least one product or choose 'Send me an assortment'"
        }

        sample_wizard.set_field("sendAssortment", True)
        assert sample_wizard.advance()
        assert sample_wizard.current_step == 3
        assert sample_wizard.get_errors() == {}

    def test_prescribing_doctor_required(self, finder_wizard):
        finder_wizard.set_field("insuranceType", "medicaid")
        finder_wizard.advance()
        finder_wizard.toggle_set_member("productInterest", "incontinence")
        finder_wizard.advance()
        assert finder_wizard.current_step == 3

        assert not finder_wizard.advance()
        assert finder_wizard.get_errors() == {"hasPrescribingDoctor": "Please select an option"}
        assert finder_wizard.current_step == 3

        finder_wizard.set_field("hasPrescribingDoctor", "no")
        assert finder_wizard.advance()
        assert finder_wizard.current_step == 4

    @pytest.mark.parametrize("answers", [
        {},
        {"fullName": "Jo"},
        {"fullName": "Jo", "email": "jo@example.com", "phone": "123"},
        {"fullName": " ", "email": "jo@example.com", "phone": "5551234567", "zipCode": "12345"},
    ])
    def test_step_never_moves_with_errors(self, sample_wizard, answers):
        fill(sample_wizard, answers)
        sample_wizard.advance()
        assert sample_wizard.get_errors()
        assert sample_wizard.current_step == 1

    def test_errors_cleared_on_success(self, sample_wizard, contact_answers):
        sample_wizard.advance()
        assert sample_wizard.get_errors()
        fill(sample_wizard, contact_answers)
        sample_wizard.advance()
        assert sample_wizard.get_errors() == {}

    def test_signals(self, sample_wizard, contact_answers, qtbot):
        with qtbot.waitSignal(sample_wizard.errors_changed) as blocker:
            sample_wizard.advance()
        assert "fullName" in blocker.args[0]

        fill(sample_wizard, contact_answers)
        with qtbot.waitSignal(sample_wizard.step_changed) as blocker:
            sample_wizard.advance()
        assert blocker.args == [1, 2]


class TestRetreat:

    def test_not_on_first_step(self, sample_wizard):
        assert sample_wizard.retreat() is False
        assert sample_wizard.current_step == 1

    def test_retreat_then_advance_returns(self, sample_wizard, contact_answers):
        fill(sample_wizard, contact_answers)
        sample_wizard.advance()
        sample_wizard.set_field("sendAssortment", True)
        sample_wizard.advance()
        assert sample_wizard.current_step == 3

        assert sample_wizard.retreat()
        assert sample_wizard.current_step == 2
        assert sample_wizard.advance()
        assert sample_wizard.current_step == 3
        assert sample_wizard.get_errors() == {}

    def test_retreat_skips_validation_and_clears_errors(self, sample_wizard, contact_answers):
        fill(sample_wizard, contact_answers)
        sample_wizard.advance()
        sample_wizard.advance()  # step 2 has nothing selected
        assert sample_wizard.get_errors()

        sample_wizard.retreat()
        assert sample_wizard.current_step == 1
        assert sample_wizard.get_errors() == {}


class TestSubmitAndClose:

    def _complete_sample_request(self, controller, contact_answers):
        fill(controller, contact_answers)
        controller.advance()
        controller.toggle_set_member("selectedProducts", "adult-briefs")
        controller.advance()
        controller.set_field("insuranceProvider", "medicare")
        return controller.advance()

    def test_submit_on_last_step(self, sample_wizard, memory_storage, contact_answers, qtbot):
        with qtbot.waitSignal(sample_wizard.submitted) as blocker:
            assert self._complete_sample_request(sample_wizard, contact_answers)

        assert sample_wizard.is_submitted()
        assert checkpoint(memory_storage, SAMPLE_KEY) is None
        assert blocker.args[0]["selectedProducts"] == ["adult-briefs"]
        assert blocker.args[0]["insuranceProvider"] == "medicare"

    def test_no_changes_after_submit(self, sample_wizard, memory_storage, contact_answers):
        self._complete_sample_request(sample_wizard, contact_answers)
        assert not sample_wizard.set_field("fullName", "Someone Else")
        assert not sample_wizard.advance()
        assert not sample_wizard.retreat()
        assert checkpoint(memory_storage, SAMPLE_KEY) is None

    def test_close_after_submit_resets(self, sample_wizard, memory_storage, contact_answers):
        self._complete_sample_request(sample_wizard, contact_answers)
        sample_wizard.close()

        assert not sample_wizard.is_submitted()
        assert sample_wizard.current_step == 1
        assert sample_wizard.get_answers() == sample_wizard.definition.schema.defaults()
        assert checkpoint(memory_storage, SAMPLE_KEY) is None

    def test_close_in_progress_keeps_checkpoint(self, sample_wizard, memory_storage, contact_answers, qtbot):
        fill(sample_wizard, contact_answers)
        sample_wizard.advance()

        with qtbot.waitSignal(sample_wizard.closed):
            sample_wizard.close()

        assert sample_wizard.current_step == 2
        assert checkpoint(memory_storage, SAMPLE_KEY)["step"] == 2


class TestCheckpoints:

    def test_every_change_is_checkpointed(self, sample_wizard, memory_storage):
        sample_wizard.set_field("fullName", "Jane")
        assert checkpoint(memory_storage, SAMPLE_KEY) == {
            "formData": sample_wizard.get_answers(),
            "step": 1,
        }

    def test_resume_in_new_session(self, qapp, memory_storage, contact_answers):
        first = WizardController(sample_request_definition(), memory_storage)
        fill(first, contact_answers)
        first.advance()
        first.toggle_set_member("selectedProducts", "ostomy-pouches")

        second = WizardController(sample_request_definition(), memory_storage)
        assert second.current_step == 2
        assert second.get_answers() == first.get_answers()
        assert second.get_errors() == {}

    def test_corrupt_checkpoint_starts_fresh(self, qapp):
        storage = InMemoryStorage({SAMPLE_KEY: "{oops"})
        controller = WizardController(sample_request_definition(), storage)
        assert controller.current_step == 1
        assert controller.get_answers() == controller.definition.schema.defaults()

    def test_out_of_range_step_starts_fresh(self, qapp):
        storage = InMemoryStorage({FINDER_KEY: json.dumps({"formData": {"insuranceType": "medicare"}, "step": 5})})
        controller = WizardController(supply_finder_definition(), storage)
        assert controller.current_step == 1
        assert controller.get_answers()["insuranceType"] == ""

    def test_variants_use_separate_keys(self, sample_wizard, finder_wizard, memory_storage):
        sample_wizard.set_field("fullName", "Sample Person")
        finder_wizard.set_field("fullName", "Finder Person")
        assert checkpoint(memory_storage, SAMPLE_KEY)["formData"]["fullName"] == "Sample Person"
        assert checkpoint(memory_storage, FINDER_KEY)["formData"]["fullName"] == "Finder Person"

    def test_write_failures_do_not_block(self, qapp, contact_answers):
        controller = WizardController(sample_request_definition(), FailingWrites())
        fill(controller, contact_answers)
        assert controller.advance()
        assert controller.current_step == 2


class TestAssortment:

    def test_assortment_clears_products(self, sample_wizard):
        sample_wizard.toggle_set_member("selectedProducts", "adult-briefs")
        sample_wizard.toggle_set_member("selectedProducts", "foley-catheters")
        sample_wizard.set_field("sendAssortment", True)
        assert sample_wizard.get_answers()["selectedProducts"] == []

    def test_products_locked_while_assortment(self, sample_wizard):
        sample_wizard.set_field("sendAssortment", True)
        assert not sample_wizard.toggle_set_member("selectedProducts", "adult-briefs")
        assert sample_wizard.get_answers()["selectedProducts"] == []

        sample_wizard.set_field("sendAssortment", False)
        assert sample_wizard.toggle_set_member("selectedProducts", "adult-briefs")
        assert sample_wizard.get_answers()["selectedProducts"] == ["adult-briefs"]

    def test_product_list_edit_locked_while_assortment(self, sample_wizard, memory_storage):
        sample_wizard.set_field("sendAssortment", True)
        assert not sample_wizard.set_field("selectedProducts", ["adult-briefs"])
        assert sample_wizard.get_answers()["selectedProducts"] == []
        assert checkpoint(memory_storage, SAMPLE_KEY)["formData"]["selectedProducts"] == []


class TestProgress:

    def test_sample_request_percentages(self, sample_wizard, contact_answers):
        assert sample_wizard.progress_percent() == 33
        fill(sample_wizard, contact_answers)
        sample_wizard.advance()
        assert sample_wizard.progress_percent() == 67
        sample_wizard.set_field("sendAssortment", True)
        sample_wizard.advance()
        assert sample_wizard.progress_percent() == 100
        assert sample_wizard.is_last_step()

    def test_supply_finder_first_step(self, finder_wizard):
        assert finder_wizard.progress_percent() == 25
        assert not finder_wizard.can_retreat()


class TestOptionLists:

    def test_unknown_options_do_not_pass_validation(self, finder_wizard, memory_storage):
        assert not finder_wizard.set_field("insuranceType", "bogus-plan")
        assert not finder_wizard.advance()
        assert finder_wizard.get_errors() == {"insuranceType": "Please select your insurance type"}

        finder_wizard.set_field("insuranceType", "medicare")
        finder_wizard.advance()
        assert not finder_wizard.toggle_set_member("productInterest", "not-a-product")
        assert not finder_wizard.advance()
        assert finder_wizard.current_step == 2
        assert "not-a-product" not in checkpoint(memory_storage, FINDER_KEY)["formData"]["productInterest"]

    def test_unknown_options_in_checkpoint_are_dropped(self, qapp):
        storage = InMemoryStorage({FINDER_KEY: json.dumps({
            "formData": {"insuranceType": "bogus-plan", "productInterest": ["not-a-product"]},
            "step": 2,
        })})
        controller = WizardController(supply_finder_definition(), storage)
        assert controller.current_step == 2
        assert controller.get_answers()["insuranceType"] == ""
        assert controller.get_answers()["productInterest"] == []
