#This file will contain the Reminder class and the pending selection the user edits before adding a reminder.

#models.py:
# Contains the Reminder and PendingSelection classes.
# Represents the data model for reminders.

from dataclasses import dataclass, replace

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M'


@dataclass(frozen=True)
class Reminder:
    message: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, 24-hour

    def render(self):
        return f"Message: {self.message}\nDate: {self.date}\nTime: {self.time}"

    def __repr__(self):
        return f"<Reminder(message='{self.message}', date='{self.date}', time='{self.time}')>"


@dataclass(frozen=True)
class PendingSelection:
    """Draft fields for the next reminder. Updates return a new selection."""
    message: str = ""
    date: str = ""
    time: str = ""

    def with_message(self, message):
        return replace(self, message=message)

    def with_date(self, date):
        return replace(self, date=date)

    def with_time(self, time):
        return replace(self, time=time)

    def is_complete(self):
        return bool(self.message and self.date and self.time)
