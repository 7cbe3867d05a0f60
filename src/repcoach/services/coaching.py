"""Coach message selection for situational triggers.

Every trigger maps to a fixed message shape (type, sentiment, priority and
quick replies). The mapping is a plain lookup table; there is no
conversation state.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from ..metrics.rounding import round_half_up
from ..models.goals import Priority
from ..models.user_profile import CoachingFrequency


class CoachingTrigger(str, Enum):
    """Situations that prompt the coach to speak."""

    WORKOUT_START = "workout_start"
    WORKOUT_COMPLETE = "workout_complete"
    MISSED_WORKOUT = "missed_workout"
    PLATEAU = "plateau"
    PERSONAL_RECORD = "personal_record"
    GOAL_ACHIEVED = "goal_achieved"
    STRUGGLE_DETECTED = "struggle_detected"
    WEEKLY_CHECKIN = "weekly_checkin"
    USER_QUESTION = "user_question"
    SCHEDULE_CHANGE = "schedule_change"
    INJURY_REPORTED = "injury_reported"


class MessageType(str, Enum):
    WORKOUT_SUGGESTION = "workout_suggestion"
    NUTRITION_ADVICE = "nutrition_advice"
    MOTIVATION = "motivation"
    CORRECTION = "correction"
    PROGRESS_CELEBRATION = "progress_celebration"
    GOAL_SETTING = "goal_setting"
    EDUCATION = "education"
    REMINDER = "reminder"
    RECOVERY_GUIDANCE = "recovery_guidance"
    FORM_FEEDBACK = "form_feedback"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    CONSTRUCTIVE = "constructive"
    CELEBRATORY = "celebratory"


@dataclass(frozen=True)
class CoachingRule:
    """The response shape for one trigger."""

    message_type: MessageType
    sentiment: Sentiment
    priority: Priority
    text: str
    quick_replies: tuple[str, ...]
    enthusiastic_text: str | None = None


COACHING_RULES: dict[CoachingTrigger, CoachingRule] = {
    CoachingTrigger.WORKOUT_START: CoachingRule(
        message_type=MessageType.MOTIVATION,
        sentiment=Sentiment.POSITIVE,
        priority=Priority.MEDIUM,
        text="Time to get moving! Let's start your workout.",
        enthusiastic_text="Let's crush this workout! You've got this!",
        quick_replies=("Let's do this!", "I'm ready", "Start"),
    ),
    CoachingTrigger.WORKOUT_COMPLETE: CoachingRule(
        message_type=MessageType.PROGRESS_CELEBRATION,
        sentiment=Sentiment.CELEBRATORY,
        priority=Priority.LOW,
        text="Nice job completing your workout today. Keep it up!",
        enthusiastic_text="Incredible work today! You crushed that workout!",
        quick_replies=("How did it feel?", "Rate difficulty", "Schedule next"),
    ),
    CoachingTrigger.MISSED_WORKOUT: CoachingRule(
        message_type=MessageType.MOTIVATION,
        sentiment=Sentiment.CONSTRUCTIVE,
        priority=Priority.MEDIUM,
        text="No worries! Let's get back on track. When can you squeeze in a quick session?",
        quick_replies=("Reschedule", "I'll try today", "Plan tomorrow"),
    ),
    CoachingTrigger.PLATEAU: CoachingRule(
        message_type=MessageType.WORKOUT_SUGGESTION,
        sentiment=Sentiment.CONSTRUCTIVE,
        priority=Priority.MEDIUM,
        text="I've noticed your progress has slowed. Let's try a new approach.",
        quick_replies=("I'm interested", "Not now", "Tell me more"),
    ),
    CoachingTrigger.PERSONAL_RECORD: CoachingRule(
        message_type=MessageType.PROGRESS_CELEBRATION,
        sentiment=Sentiment.CELEBRATORY,
        priority=Priority.HIGH,
        text="New personal record! You're getting stronger every day!",
        quick_replies=("Amazing!", "Thanks coach", "What's next?"),
    ),
    CoachingTrigger.GOAL_ACHIEVED: CoachingRule(
        message_type=MessageType.PROGRESS_CELEBRATION,
        sentiment=Sentiment.CELEBRATORY,
        priority=Priority.HIGH,
        text="Congratulations! You've achieved your goal! What's next?",
        quick_replies=("So proud!", "Next goal?", "Celebrate"),
    ),
    CoachingTrigger.STRUGGLE_DETECTED: CoachingRule(
        message_type=MessageType.CORRECTION,
        sentiment=Sentiment.CONSTRUCTIVE,
        priority=Priority.MEDIUM,
        text=(
            "I see you're having a tough time. Remember, progress isn't "
            "always linear. You've got this!"
        ),
        quick_replies=("Help me", "I can do this", "Need tips"),
    ),
    CoachingTrigger.WEEKLY_CHECKIN: CoachingRule(
        message_type=MessageType.GOAL_SETTING,
        sentiment=Sentiment.NEUTRAL,
        priority=Priority.LOW,
        text="How are you feeling about your progress this week? Let's check in!",
        quick_replies=("I'm on track", "I'm struggling", "Need help"),
    ),
    CoachingTrigger.USER_QUESTION: CoachingRule(
        message_type=MessageType.EDUCATION,
        sentiment=Sentiment.POSITIVE,
        priority=Priority.MEDIUM,
        text="Great question! I'm here to help you succeed.",
        quick_replies=("Thanks!", "More info", "Got it"),
    ),
    CoachingTrigger.SCHEDULE_CHANGE: CoachingRule(
        message_type=MessageType.WORKOUT_SUGGESTION,
        sentiment=Sentiment.NEUTRAL,
        priority=Priority.MEDIUM,
        text="Let's adjust your schedule to better fit your lifestyle.",
        quick_replies=("Sounds good", "Prefer different time", "Flexible"),
    ),
    CoachingTrigger.INJURY_REPORTED: CoachingRule(
        message_type=MessageType.RECOVERY_GUIDANCE,
        sentiment=Sentiment.CONSTRUCTIVE,
        priority=Priority.URGENT,
        text="Your safety comes first. Let's modify your plan while you recover.",
        quick_replies=("Need guidance", "See doctor", "Rest advice"),
    ),
}

_missing = set(CoachingTrigger) - set(COACHING_RULES)
if _missing:
    raise RuntimeError(
        "No coaching rule for: " + ", ".join(sorted(t.value for t in _missing))
    )

# Sent regardless of the user's coaching frequency.
ALWAYS_SEND_TRIGGERS = frozenset(
    {
        CoachingTrigger.INJURY_REPORTED,
        CoachingTrigger.GOAL_ACHIEVED,
        CoachingTrigger.PERSONAL_RECORD,
    }
)

FREQUENCY_HOURS = {
    CoachingFrequency.HIGH: 4,
    CoachingFrequency.MEDIUM: 12,
    CoachingFrequency.LOW: 24,
}

ENTHUSIASTIC_THRESHOLD = 7


@dataclass
class CoachMessage:
    """A message from the coach, as shown in the chat."""

    user_id: str
    trigger: CoachingTrigger
    message_type: MessageType
    sentiment: Sentiment
    priority: Priority
    text: str
    quick_replies: list[str]
    context: str
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: f"msg_{uuid4().hex[:12]}")
    is_read: bool = False
    user_response: str | None = None
    effectiveness: int | None = None  # 1-10

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "trigger": self.trigger.value,
            "type": self.message_type.value,
            "sentiment": self.sentiment.value,
            "priority": self.priority.value,
            "text": self.text,
            "quick_replies": self.quick_replies,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "is_read": self.is_read,
        }


def rule_for(trigger: CoachingTrigger | str) -> CoachingRule:
    return COACHING_RULES[CoachingTrigger(trigger)]


def select_message(
    trigger: CoachingTrigger | str,
    user_id: str,
    enthusiasm: int = 5,
    recent_workouts: int = 0,
) -> CoachMessage:
    """Build the coach message for a trigger.

    Args:
        trigger: What happened
        user_id: Who the message is for
        enthusiasm: Coach personality, 1-10; above 7 picks the livelier text
        recent_workouts: Number of recent workouts, for the context line

    Returns:
        A new unread message
    """
    trigger = CoachingTrigger(trigger)
    rule = COACHING_RULES[trigger]
    text = rule.text
    if enthusiasm > ENTHUSIASTIC_THRESHOLD and rule.enthusiastic_text:
        text = rule.enthusiastic_text

    return CoachMessage(
        user_id=user_id,
        trigger=trigger,
        message_type=rule.message_type,
        sentiment=rule.sentiment,
        priority=rule.priority,
        text=text,
        quick_replies=list(rule.quick_replies),
        context=(
            f"Triggered by {trigger.value} for user with "
            f"{recent_workouts} recent workouts"
        ),
    )


def should_send_message(
    last_interaction: datetime,
    frequency: CoachingFrequency | str,
    trigger: CoachingTrigger | str,
    now: datetime | None = None,
) -> bool:
    """Whether enough time has passed to message the user again."""
    now = now or datetime.now()
    hours_since = (now - last_interaction).total_seconds() / 3600
    min_hours = FREQUENCY_HOURS[CoachingFrequency(frequency)]
    return hours_since >= min_hours or CoachingTrigger(trigger) in ALWAYS_SEND_TRIGGERS


def engagement_score(messages: list[CoachMessage]) -> int:
    """0-100 score mixing response rate (60%) and rated helpfulness (40%)."""
    if not messages:
        return 0
    responses = [m for m in messages if m.user_response is not None]
    if not responses:
        return 0
    response_rate = len(responses) / len(messages)
    avg_effectiveness = sum(
        m.effectiveness if m.effectiveness is not None else 5 for m in responses
    ) / len(responses)
    return round_half_up((response_rate * 0.6 + avg_effectiveness / 10 * 0.4) * 100)
