import os
from typing import Optional

from dotenv import load_dotenv, find_dotenv

API_KEY_ENV = "GEMINI_API_KEY"
GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
FUNCTION_PATH = "/.netlify/functions/gemini-proxy"


def get_api_key() -> Optional[str]:
    """Read the Gemini key from the process environment (.env loaded if present)."""
    load_dotenv(find_dotenv())
    return os.getenv(API_KEY_ENV)
