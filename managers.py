#This file will contain the reminder store operations and the ReminderManager and Notifier classes.

#managers.py:
# Contains add_reminder() and clear_reminders(), which never mutate the list they are given.
# Contains the Notifier (one pending confirmation at a time) and the ReminderManager,
# which owns the state of a screen session.

import logging

from models import PendingSelection, Reminder

CLEARED_MESSAGE = "All reminders cleared"


def add_reminder(reminders, message, date, time):
    """Return a new list with the reminder appended, and the confirmation text.

    No validation happens here; callers decide whether the fields are usable.
    """
    new_reminders = tuple(reminders) + (Reminder(message, date, time),)
    return new_reminders, f"Reminder set for {date} at {time}"


def clear_reminders():
    return (), CLEARED_MESSAGE


class Notifier:
    """Holds at most one confirmation waiting to be shown.

    Posting while a confirmation is still pending replaces it.
    """

    def __init__(self):
        self._pending = None

    @property
    def pending(self):
        return self._pending

    def post(self, message):
        if self._pending is not None:
            logging.debug("Dropping undisplayed confirmation: '%s'", self._pending)
        self._pending = message

    def drain(self):
        message, self._pending = self._pending, None
        return message


class ReminderManager:
    def __init__(self, reset_after_add=False, notifier=None):
        self.reminders = ()
        self.pending = PendingSelection()
        self.notifier = notifier if notifier is not None else Notifier()
        self.reset_after_add = reset_after_add

    def set_message(self, message):
        self.pending = self.pending.with_message(message)

    def set_date(self, date):
        # None means the picker was dismissed
        if date is not None:
            self.pending = self.pending.with_date(date)

    def set_time(self, time):
        if time is not None:
            self.pending = self.pending.with_time(time)

    def set_reminder(self):
        """Add the pending selection as a reminder.

        Does nothing and returns None unless message, date and time are all set.
        """
        if not self.pending.is_complete():
            return None
        pending = self.pending
        self.reminders, confirmation = add_reminder(
            self.reminders, pending.message, pending.date, pending.time
        )
        logging.info("Added reminder: '%s' at %s %s", pending.message, pending.date, pending.time)
        if self.reset_after_add:
            self.pending = PendingSelection()
        self.notifier.post(confirmation)
        return confirmation

    def clear_all(self):
        count = len(self.reminders)
        self.reminders, confirmation = clear_reminders()
        logging.info("Cleared %d reminder(s)", count)
        self.notifier.post(confirmation)
        return confirmation
