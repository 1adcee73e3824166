# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "ASTRO_APP_NAME": "App display name (default: astronaut-scheduler).",
    "ASTRO_LOG_LEVEL": "Console logging level (default: INFO).",
    "ASTRO_LOG_COLOR": "Colored [LOG]/[ERROR] console lines (true/false, default: true).",
    "ASTRO_LOG_TO_FILE": "Also write a full debug log file (true/false, default: true).",
    "ASTRO_LOG_DIR": "Directory for scheduler.log (default: .local/astro).",
    # Schedule
    "ASTRO_CREW": "Comma/space separated crew names notified of conflicts (default: Neil).",
    "ASTRO_DEFAULT_PRIORITY": "Priority used when /add omits one (default: Medium).",
}
