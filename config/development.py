import os

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Pre-populate the four demo employees on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
