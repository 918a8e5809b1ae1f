# config.py
"""Global configuration for the job portal.

Loads settings from .env (local) or st.secrets (deployment)
and exposes them as module-level constants.
"""
import os

import streamlit as st
from dotenv import load_dotenv

# Load .env file (if present)
load_dotenv()

DEFAULT_JOBS_API_URL = "https://job-portal-backend-2-n1nc.onrender.com/jobs"

# Remote /jobs resource (GET lists, POST creates)
# Surrounding quotes in `.env` will be trimmed automatically
JOBS_API_URL = os.getenv("JOBS_API_URL", DEFAULT_JOBS_API_URL).strip("\"' ")
JOBS_API_TIMEOUT = float(os.getenv("JOBS_API_TIMEOUT", "15"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

# Override from Streamlit secrets (if present)
try:
    secrets_data = st.secrets.get("jobs_api")
except (FileNotFoundError, st.errors.StreamlitSecretNotFoundError):
    secrets_data = None

if secrets_data:
    if secrets_data.get("JOBS_API_URL"):
        JOBS_API_URL = secrets_data["JOBS_API_URL"]
    if secrets_data.get("JOBS_API_TIMEOUT"):
        JOBS_API_TIMEOUT = float(secrets_data["JOBS_API_TIMEOUT"])
