import os
from dotenv import load_dotenv

load_dotenv()

# Sign dictionary source
SIGN_SOURCE_URL_TEMPLATE = os.getenv("SIGN_SOURCE_URL_TEMPLATE", "https://www.signbsl.com/sign/{word}")
SIGN_SOURCE_NAME = os.getenv("SIGN_SOURCE_NAME", "signbsl.com")

# The source site rejects clients without a browser-like User-Agent
SIGN_USER_AGENT = os.getenv(
    "SIGN_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)

# Fetch Configuration
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "10"))  # seconds, per word
FETCH_RETRIES = int(os.getenv("FETCH_RETRIES", "0"))  # 0 = single attempt per word
RESOLUTION_TIME_BUDGET = float(os.getenv("RESOLUTION_TIME_BUDGET", "30"))  # seconds, whole phrase

# Runtime Configuration
APP_ENV = os.getenv("APP_ENV", "production")  # production, development
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "5000"))
