"""Interactive workout entry via questionnaire."""

from datetime import date

import questionary
from questionary import Style

from ..models.player import Player
from ..models.workout import WorkoutEntry, WorkoutLog, WorkoutSet, WorkoutSource

custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


class ManualWorkoutClient:
    """Interactive questionnaire for logging a workout."""

    async def collect_workout(self, players: list[Player]) -> WorkoutLog | None:
        """Ask for the workout details.

        Returns:
            The unscored workout, or None if the user cancelled
        """
        print("\n=== Log a Workout ===\n")

        user_id = await questionary.select(
            "Who trained?",
            choices=[
                questionary.Choice(f"{p.name} ({p.position or '-'})", p.id)
                for p in players
            ],
            style=custom_style,
        ).ask_async()
        if user_id is None:
            return None

        date_str = await questionary.text(
            "Date (YYYY-MM-DD):",
            default=date.today().isoformat(),
            style=custom_style,
        ).ask_async()
        try:
            workout_date = date.fromisoformat(date_str)
        except (ValueError, TypeError):
            workout_date = date.today()

        title = await questionary.text(
            "Workout title:",
            default="",
            style=custom_style,
        ).ask_async()

        source = await questionary.select(
            "What kind of session was it?",
            choices=[
                questionary.Choice("Personal workout", WorkoutSource.PLAYER),
                questionary.Choice("Coach-assigned workout", WorkoutSource.COACH),
                questionary.Choice("Team training", WorkoutSource.TEAM),
            ],
            style=custom_style,
        ).ask_async()
        if source is None:
            return None

        duration_str = await questionary.text(
            "Duration in minutes (leave blank if unknown):",
            default="",
            style=custom_style,
        ).ask_async()
        try:
            duration = int(duration_str) if duration_str else None
        except ValueError:
            duration = None

        entries = []
        log_sets = await questionary.confirm(
            "Log exercises and sets?",
            default=source != WorkoutSource.TEAM,
            style=custom_style,
        ).ask_async()
        if log_sets:
            entries = await self._collect_entries()

        notes = await questionary.text(
            "Notes (optional):",
            default="",
            style=custom_style,
        ).ask_async()

        return WorkoutLog(
            user_id=user_id,
            date=workout_date,
            title=title or "",
            source=source,
            duration_minutes=duration if duration and duration > 0 else None,
            entries=entries,
            notes=notes or "",
        )

    async def _collect_entries(self) -> list[WorkoutEntry]:
        """Collect exercises, each with one or more sets."""
        entries = []

        while True:
            exercise = await questionary.text(
                "Exercise name (leave blank to finish):",
                style=custom_style,
            ).ask_async()
            if not exercise:
                break

            sets_str = await questionary.text(
                "Sets as REPSxWEIGHT separated by commas (e.g. 5x100, 5x100, 3x110):",
                style=custom_style,
            ).ask_async()

            sets = []
            for item in (sets_str or "").split(","):
                reps_str, _, weight_str = item.strip().partition("x")
                try:
                    reps = int(reps_str)
                    weight = float(weight_str) if weight_str else None
                except ValueError:
                    continue
                if reps < 0 or (weight is not None and weight < 0):
                    continue
                sets.append(WorkoutSet(reps=reps, weight=weight))

            entries.append(WorkoutEntry(exercise=exercise, sets=sets))

        return entries
