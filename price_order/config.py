import os
from dotenv import load_dotenv

load_dotenv() # Values from a local .env take effect unless already set in the environment

APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8010"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper() # Root logger level for the service
