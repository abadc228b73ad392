#This file will contain the user interface functions and the main() function. It will import the classes from models.py and managers.py.

#main.py
# Contains the user interface functions (enter_message_ui, select_date_ui, etc.).
# Contains the main() function, which creates the ReminderManager and starts the program loop.
# Manages user interaction and ties everything together.

import logging

from managers import ReminderManager
from pickers import pick_date, pick_time

LOG_FILE = "reminder_bot.log"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Pending message, date and time stay filled in after a reminder is set,
# so the same date and time can be reused for the next one.
RESET_AFTER_ADD = False


def configure_logging():
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(LOG_FILE),
            logging.StreamHandler()
        ]
    )


def enter_message_ui(reminder_manager):
    message = input("Enter reminder message: ")
    reminder_manager.set_message(message)


def select_date_ui(reminder_manager):
    text = input("Select date (YYYY-MM-DD or e.g. 'tomorrow', blank for today): ")
    date = pick_date(text)
    if date is None:
        print("Sorry, I didn't understand the date you entered.")
        return
    reminder_manager.set_date(date)


def select_time_ui(reminder_manager):
    text = input("Select time (HH:MM or e.g. '5 pm', blank for now): ")
    time = pick_time(text)
    if time is None:
        print("Sorry, I didn't understand the time you entered.")
        return
    reminder_manager.set_time(time)


def set_reminder_ui(reminder_manager):
    reminder_manager.set_reminder()


def clear_reminders_ui(reminder_manager):
    reminder_manager.clear_all()


def view_reminders_ui(reminder_manager):
    reminders = reminder_manager.reminders
    if not reminders:
        print("You have no reminders.")
        return
    print("\nHere's your list of reminders:")
    for idx, reminder in enumerate(reminders, start=1):
        print(f"\n{idx}.")
        print(reminder.render())


def show_confirmation(reminder_manager):
    message = reminder_manager.notifier.drain()
    if message is not None:
        print(f"\n*** {message} ***")


def show_selection(reminder_manager):
    pending = reminder_manager.pending
    print(f"\nMessage: {pending.message}")
    print(f"Selected Date: {pending.date}")
    print(f"Selected Time: {pending.time}")


ACTIONS = {
    '1': enter_message_ui,
    '2': select_date_ui,
    '3': select_time_ui,
    '4': set_reminder_ui,
    '5': clear_reminders_ui,
    '6': view_reminders_ui,
}


def main(reset_after_add=RESET_AFTER_ADD):
    configure_logging()
    reminder_manager = ReminderManager(reset_after_add=reset_after_add)

    try:
        while True:
            show_selection(reminder_manager)
            print("\nWhat would you like to do?")
            print("1. Enter reminder message")
            print("2. Select date")
            print("3. Select time")
            print("4. Set reminder")
            print("5. Clear all reminders")
            print("6. View reminders")
            print("7. Exit")
            choice = input("Enter your choice (1-7): ").strip()

            if choice == '7':
                logging.info("User chose to exit the program.")
                print("Goodbye!")
                break
            action = ACTIONS.get(choice)
            if action is None:
                logging.warning("Invalid menu choice: '%s'", choice)
                print("Invalid choice. Please try again.")
                continue
            try:
                action(reminder_manager)
            except Exception as e:
                logging.error("Error handling menu choice %s: %s", choice, e)
                print("An error occurred. Please try again.")
            show_confirmation(reminder_manager)
    except KeyboardInterrupt:
        logging.info("Program terminated by user.")
        print("\nExiting program.")
    except Exception as e:
        logging.critical("Unexpected error in main loop: %s", e)
        print("An unexpected error occurred. Exiting the program.")


if __name__ == "__main__":
    main()
