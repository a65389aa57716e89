"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Multitainment"

TOOLBAR_START: str = "Start"
TOOLBAR_SETTINGS: str = "Settings"
TOOLBAR_HELP: str = "Help"
TOOLBAR_ABOUT: str = "About"

RANGE_GROUP_TITLE: str = "Multiplication tables"
RANGE_FROM_TEMPLATE: str = "From {value}"
RANGE_TO_TEMPLATE: str = "To {value}"
COUNT_GROUP_TITLE: str = "Number of questions"
QUESTION_GROUP_TITLE: str = "Question"
ANSWER_PLACEHOLDER: str = "Enter your answer"
PROGRESS_TEMPLATE: str = "Question {number} of {total} | Mistakes: {mistakes}"

NOT_STARTED_TITLE: str = "Game not started"
NOT_STARTED_MESSAGE: str = "Press the start button at the top right to start the game!"
INCORRECT_TITLE: str = "Incorrect"
INCORRECT_MESSAGE: str = "Try again!"
RESULTS_TITLE: str = "You won!"
RESULTS_MESSAGE_TEMPLATE: str = "You answered {count} questions correctly and got {mistakes} mistakes."
