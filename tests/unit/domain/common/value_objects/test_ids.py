"""Tests for reader session identifiers."""

import pytest

from heidelberg.domain.common.value_objects import ReaderSessionId


class TestReaderSessionId:
    def test_generated_ids_are_unique(self) -> None:
        assert ReaderSessionId.generate() != ReaderSessionId.generate()

    def test_parse_round_trips_string_form(self) -> None:
        session_id = ReaderSessionId.generate()
        parsed = ReaderSessionId.parse(str(session_id))

        assert parsed == session_id
        assert hash(parsed) == hash(session_id)
        assert parsed.to_primitive() == str(session_id)

    def test_usable_as_dict_key(self) -> None:
        session_id = ReaderSessionId.generate()
        locks = {session_id: "open"}
        assert locks[ReaderSessionId.parse(str(session_id))] == "open"

    def test_parse_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            ReaderSessionId.parse("not-a-uuid")
