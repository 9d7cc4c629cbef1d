"""Network configuration for the local leaderboard viewer."""

DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8765
MAX_LEADERBOARD_PAGE_SIZE: int = 100
