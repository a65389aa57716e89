"""Static metadata describing Multitainment."""

APP_NAME = "Multitainment"
APP_VERSION = "0.2"
APP_AUTHOR = "Nick"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Multitainment is a small multiplication-table trainer built with Qt. "
    "Pick the tables you want to practise, choose how many questions to answer, and press Start."
)

HELP_TEXT = (
    "1. Choose the range of multiplication tables with the From/To steppers.\n"
    "2. Choose how many questions the round should have (5, 10, 15 or 20).\n"
    "3. Press Start in the toolbar.\n"
    "4. Type the product of each question and press Enter.\n\n"
    "A wrong answer counts as a mistake and the question stays until it is answered correctly. "
    "An empty answer counts as 0."
)
