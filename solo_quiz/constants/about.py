"""Static metadata describing SoloQuiz."""

APP_NAME = "SoloQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "SoloQuiz is a single-player desktop quiz built with Qt. It loads a question bank "
    "from a plain-text file, times every question and keeps a leaderboard of past runs."
)

HELP_TEXT_TEMPLATE = (
    "Questions are read from a UTF-8 text file made of blocks. Each block starts with a "
    "type tag (MCQ, TF or FIB) followed by a fixed number of lines:\n\n"
    "MCQ\nWhat is 2 + 2?\n3\n4\n5\n22\n2\n\n"
    "TF\nThe earth is flat.\nFalse\n\n"
    "FIB\nThe capital of France is ____.\nParis\n\n"
    "Blank lines between blocks are ignored. A session draws up to {max_questions} shuffled "
    "question(s) and gives you {seconds} second(s) for each one."
)
