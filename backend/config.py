"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

# Layout engine
RECTIFY_THRESHOLD_PX = float(os.getenv("RECTIFY_THRESHOLD_PX", "20"))
# Upper bound on sweep iterations per placement run (0 = unlimited)
MAX_SWEEP_STEPS = int(os.getenv("MAX_SWEEP_STEPS", "2000000"))

# Estimate
TAX_RATE = float(os.getenv("TAX_RATE", "0.10"))
