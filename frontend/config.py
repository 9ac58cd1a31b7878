# frontend/config.py
import os

# --- API ---
HEALTH_URL = os.environ.get("DASHBOARD_HEALTH_URL", "http://localhost:8080/api/health")
REQUEST_TIMEOUT = 5  # seconds

# --- APP SETTINGS ---
APP_TITLE = "User Directory Dashboard"
WINDOW_SIZE = "480x200"

# --- FONTS ---
FONT_FAMILY = "Arial"

# --- COLORS ---
BG_COLOR = "#F8FAFC"         # Slate 50
TEXT_COLOR_DARK = "#1E293B"  # Slate 800
SUCCESS = "#10B981"          # Emerald 500
DANGER = "#EF4444"           # Red 500
MUTED = "#64748B"            # Slate 500

# --- STATUS TEXT ---
LOADING_TEXT = "loading..."
ERROR_TEXT = "ERROR"
