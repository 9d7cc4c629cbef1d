"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "SoloQuiz"
WINDOW_WIDTH: int = 720
WINDOW_HEIGHT: int = 520
COUNTDOWN_REFRESH_INTERVAL_MS: int = 100

START_TITLE: str = "Quiz Application"
START_NAME_LABEL: str = "Enter your name:"
START_BUTTON: str = "Start Quiz"

SUBMIT_BUTTON: str = "Submit & Next"
FILL_BLANK_PROMPT: str = "Type your answer:"
CORRECT_FEEDBACK: str = "Correct!"
TIME_LABEL_TEMPLATE: str = "Time: {seconds}s"
QUESTION_HEADER_TEMPLATE: str = "Q{number}/{total}: "

RESULTS_TITLE: str = "Results & Leaderboard"
FINAL_SCORE_TEMPLATE: str = "Hi {name}, your score: {score}/{total}"
PLAY_AGAIN_BUTTON: str = "Play Again"
EXIT_BUTTON: str = "Exit"
ABOUT_BUTTON: str = "About"
HELP_BUTTON: str = "Help"
SETTINGS_BUTTON: str = "Settings"

LOAD_ERROR_TITLE: str = "Read Error"
EMPTY_BANK_TITLE: str = "Error"
EMPTY_BANK_TEMPLATE: str = "No questions found in {path}"
PERSISTENCE_WARNING_TEMPLATE: str = "Failed to write results: {message}"
ABANDON_TITLE: str = "Abandon quiz"
ABANDON_MESSAGE: str = "Your current run will not be saved. Start over?"
