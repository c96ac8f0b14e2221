"""Tests for du_simulator.schemas.

Tests cover:
- Action enum values and selector scheme
- Default result code table
- AducResult / ResultRecord behaviour
- Extended result code packing
"""

import pytest

from du_simulator.schemas import (
    Action,
    AducResult,
    DEFAULT_RESULT_CODES,
    ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE,
    ResultCode,
    ResultRecord,
    is_result_code_failure,
    make_extended_result_code,
)


class TestAction:
    """Tests for the Action enum."""

    def test_values_are_fixture_keys(self):
        assert [a.value for a in Action] == [
            "download", "install", "apply", "cancel", "isInstalled",
        ]

    def test_from_string(self):
        assert Action("isInstalled") is Action.IS_INSTALLED

    def test_unknown_action_rejected(self):
        with pytest.raises(ValueError):
            Action("backup")

    def test_selector_actions(self):
        assert Action.DOWNLOAD.uses_selector
        assert Action.IS_INSTALLED.uses_selector
        assert not Action.INSTALL.uses_selector
        assert not Action.APPLY.uses_selector
        assert not Action.CANCEL.uses_selector


class TestDefaultResultCodes:
    """The per-action default table."""

    def test_every_action_has_default(self):
        assert set(DEFAULT_RESULT_CODES) == set(Action)

    def test_defaults(self):
        assert Action.DOWNLOAD.default_result_code == 500
        assert Action.INSTALL.default_result_code == 600
        assert Action.APPLY.default_result_code == 700
        assert Action.CANCEL.default_result_code == 800

    def test_is_installed_defaults_to_installed(self):
        """isInstalled assumes the update is already applied."""
        assert Action.IS_INSTALLED.default_result_code == ResultCode.IS_INSTALLED_INSTALLED

    def test_defaults_are_not_failures(self):
        for code in DEFAULT_RESULT_CODES.values():
            assert not is_result_code_failure(code)


class TestResults:
    """Tests for AducResult and ResultRecord."""

    def test_failure_predicate(self):
        assert is_result_code_failure(ResultCode.FAILURE)
        assert is_result_code_failure(ResultCode.FAILURE_CANCELLED)
        assert not is_result_code_failure(ResultCode.SUCCESS)

    def test_aduc_result_is_failure(self):
        assert AducResult(0, 123).is_failure
        assert not AducResult(600).is_failure

    def test_aduc_result_default_erc(self):
        assert AducResult(600).extended_result_code == 0

    def test_record_to_result_drops_details(self):
        record = ResultRecord(result_code=0, extended_result_code=7, result_details="bad")
        assert record.to_result() == AducResult(0, 7)


class TestExtendedResultCode:
    """Extended result code packing."""

    def test_packing(self):
        assert make_extended_result_code(0x3, 0x01, 0x00A) == 0x3010000A

    def test_fields_are_masked(self):
        assert make_extended_result_code(0x13, 0x101, 0x10000A) == 0x3010000A

    def test_file_entity_failure_code(self):
        assert ERC_STEPS_HANDLER_GET_FILE_ENTITY_FAILURE == 0x3010000A
