"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Privacy ---
# Line content echoed in debug logs is cut to this many characters
MAX_LINE_LOG_CHARS: int = int(os.getenv("MAX_LINE_LOG_CHARS", "80"))
