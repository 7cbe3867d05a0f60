"""Tests for coach message selection."""

from datetime import datetime, timedelta

import pytest

from repcoach.models.goals import Priority
from repcoach.models.user_profile import CoachingFrequency
from repcoach.services.coaching import (
    COACHING_RULES,
    CoachingTrigger,
    MessageType,
    Sentiment,
    engagement_score,
    rule_for,
    select_message,
    should_send_message,
)


class TestCoachingRules:
    """Tests for the trigger table."""

    def test_every_trigger_has_a_rule(self):
        assert set(COACHING_RULES) == set(CoachingTrigger)

    def test_every_rule_has_quick_replies(self):
        for rule in COACHING_RULES.values():
            assert rule.text
            assert len(rule.quick_replies) == 3

    @pytest.mark.parametrize(
        "trigger,message_type,sentiment,priority",
        [
            ("workout_start", MessageType.MOTIVATION, Sentiment.POSITIVE, Priority.MEDIUM),
            (
                "workout_complete",
                MessageType.PROGRESS_CELEBRATION,
                Sentiment.CELEBRATORY,
                Priority.LOW,
            ),
            (
                "personal_record",
                MessageType.PROGRESS_CELEBRATION,
                Sentiment.CELEBRATORY,
                Priority.HIGH,
            ),
            (
                "injury_reported",
                MessageType.RECOVERY_GUIDANCE,
                Sentiment.CONSTRUCTIVE,
                Priority.URGENT,
            ),
            ("weekly_checkin", MessageType.GOAL_SETTING, Sentiment.NEUTRAL, Priority.LOW),
        ],
    )
    def test_rule_shape(self, trigger, message_type, sentiment, priority):
        rule = rule_for(trigger)
        assert rule.message_type == message_type
        assert rule.sentiment == sentiment
        assert rule.priority == priority

    def test_unknown_trigger(self):
        with pytest.raises(ValueError):
            rule_for("birthday")


class TestSelectMessage:
    """Tests for message construction."""

    def test_message_fields(self):
        message = select_message(CoachingTrigger.PLATEAU, "user-1", recent_workouts=4)

        assert message.user_id == "user-1"
        assert message.trigger == CoachingTrigger.PLATEAU
        assert message.quick_replies == ["I'm interested", "Not now", "Tell me more"]
        assert "4 recent workouts" in message.context
        assert message.id.startswith("msg_")
        assert not message.is_read

    def test_enthusiastic_coach(self):
        calm = select_message("workout_start", "u", enthusiasm=5)
        excited = select_message("workout_start", "u", enthusiasm=8)
        assert calm.text != excited.text
        assert excited.text == rule_for("workout_start").enthusiastic_text

    def test_enthusiasm_threshold_is_exclusive(self):
        message = select_message("workout_complete", "u", enthusiasm=7)
        assert message.text == rule_for("workout_complete").text

    def test_enthusiasm_without_alternate_text(self):
        message = select_message("plateau", "u", enthusiasm=10)
        assert message.text == rule_for("plateau").text

    def test_to_dict(self):
        data = select_message("goal_achieved", "u").to_dict()
        assert data["trigger"] == "goal_achieved"
        assert data["type"] == "progress_celebration"
        assert data["priority"] == "high"


class TestShouldSend:
    """Tests for coaching frequency limits."""

    NOW = datetime(2024, 1, 15, 12, 0)

    @pytest.mark.parametrize(
        "frequency,hours,expected",
        [
            (CoachingFrequency.HIGH, 4, True),
            (CoachingFrequency.HIGH, 3, False),
            (CoachingFrequency.MEDIUM, 12, True),
            (CoachingFrequency.MEDIUM, 11, False),
            (CoachingFrequency.LOW, 24, True),
            (CoachingFrequency.LOW, 23, False),
        ],
    )
    def test_frequency(self, frequency, hours, expected):
        last = self.NOW - timedelta(hours=hours)
        assert should_send_message(last, frequency, "weekly_checkin", now=self.NOW) is expected

    @pytest.mark.parametrize("trigger", ["injury_reported", "goal_achieved", "personal_record"])
    def test_important_triggers_always_sent(self, trigger):
        last = self.NOW - timedelta(minutes=5)
        assert should_send_message(last, "low", trigger, now=self.NOW)


class TestEngagementScore:
    """Tests for the engagement score."""

    def test_no_messages(self):
        assert engagement_score([]) == 0

    def test_no_responses(self):
        messages = [select_message("workout_start", "u") for _ in range(3)]
        assert engagement_score(messages) == 0

    def test_mixed(self):
        messages = [select_message("workout_start", "u") for _ in range(4)]
        messages[0].user_response = "Let's do this!"
        messages[0].effectiveness = 8
        messages[1].user_response = "Start"
        # Unrated responses count as 5
        assert engagement_score(messages) == 56

    def test_everything_answered_and_loved(self):
        messages = [select_message("workout_start", "u") for _ in range(2)]
        for message in messages:
            message.user_response = "Start"
            message.effectiveness = 10
        assert engagement_score(messages) == 100
