"""Unit tests for the Brightcove video-change event model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from video_notifier.models.events import VideoChangeEvent

EXAMPLE_EVENT = (
    '{"timestamp":1423840514446,"account_id":"775205503001","event":"video-change",'
    '"video":"4020894387001","version":26}'
)


class TestVideoChangeEvent:
    def test_parses_example(self):
        event = VideoChangeEvent.model_validate_json(EXAMPLE_EVENT)

        assert event.timestamp == 1423840514446
        assert event.account_id == "775205503001"
        assert event.event == "video-change"
        assert event.video == "4020894387001"
        assert event.version == 26

    def test_occurred_at_truncates_milliseconds(self):
        event = VideoChangeEvent.model_validate_json(EXAMPLE_EVENT)

        assert event.occurred_at == datetime(2015, 2, 13, 15, 15, 14, tzinfo=timezone.utc)

    def test_str_for_logging(self):
        event = VideoChangeEvent.model_validate_json(EXAMPLE_EVENT)

        assert str(event) == (
            "videoEvent: TimeStamp: [2015-02-13T15:15:14Z], AccountId: [775205503001], "
            "Event: [video-change], Video: [4020894387001], Version: [26]"
        )

    def test_absent_fields_take_zero_values(self):
        event = VideoChangeEvent.model_validate_json('{"account_id":"775205503001","video":"4020894387001"}')

        assert event.account_id == "775205503001"
        assert event.video == "4020894387001"
        assert event.timestamp == 0
        assert event.event == ""
        assert event.version == 0

    @pytest.mark.parametrize(
        "body",
        [
            '{"timestamp":1423840514446,"account_id":"775205503001"',
            "[]",
            "",
            '{"timestamp":"1423840514446","account_id":"775205503001","video":"4020894387001","version":26}',
            '{"timestamp":1423840514446,"account_id":"775205503001","video":"4020894387001","version":"26"}',
            '{"timestamp":1423840514446,"account_id":775205503001,"video":"4020894387001","version":26}',
            '{"timestamp":1423840514446.5,"account_id":"775205503001","video":"4020894387001","version":26}',
        ],
    )
    def test_rejects_malformed_body(self, body: str):
        with pytest.raises(ValidationError):
            VideoChangeEvent.model_validate_json(body)
