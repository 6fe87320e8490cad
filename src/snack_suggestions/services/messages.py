"""Localized notification text."""

from dataclasses import dataclass

from snack_suggestions.domain.snacks import SnackSuggestion

TEST_TITLE_PREFIX = "🧪 Test: "
DELAYED_TITLE_PREFIX = "⏰ Delayed: "
SIMULATED_TITLE = "🕘 Simulated Snack Time Alert!"
SIMULATED_BODY = (
    "It's snack time! Try {snack_name} - {calories} cal, {protein}g protein!"
)

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "title": "Nutrition Alert! 🍎",
        "body": (
            "Your child might not reach today's nutrition goals. "
            "Try {snack_name} - {calories} cal, {protein}g protein!"
        ),
    },
    "id": {
        "title": "Peringatan Nutrisi! 🍎",
        "body": (
            "Anak Anda mungkin tidak mencapai target nutrisi hari ini. "
            "Coba {snack_name} - {calories} kal, {protein}g protein!"
        ),
    },
}


class UnsupportedLanguageError(ValueError):
    """Raised for a language without notification messages."""


@dataclass(frozen=True)
class NotificationMessages:
    """Notification text for one language."""

    language: str = "en"

    def __post_init__(self) -> None:
        if self.language not in MESSAGES:
            raise UnsupportedLanguageError(
                f"No notification messages for language {self.language!r}"
            )

    def title(self, test: bool = False) -> str:
        """Return the snack suggestion title."""
        title = MESSAGES[self.language]["title"]
        return f"{TEST_TITLE_PREFIX}{title}" if test else title

    def body(self, suggestion: SnackSuggestion) -> str:
        """Return the body advertising a snack."""
        return MESSAGES[self.language]["body"].format(
            snack_name=suggestion.name,
            calories=suggestion.calories,
            protein=suggestion.protein,
        )

    def simulated(self, suggestion: SnackSuggestion) -> tuple[str, str]:
        """Return title and body for a simulated snack time alert."""
        return SIMULATED_TITLE, SIMULATED_BODY.format(
            snack_name=suggestion.name,
            calories=suggestion.calories,
            protein=suggestion.protein,
        )
