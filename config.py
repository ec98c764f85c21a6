import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    MESSAGE_BROKER = data.get("MESSAGE_BROKER", "redis")
    EMAIL_TOPIC = data.get("EMAIL_TOPIC", "email")
    PASSWORD_RECOVERY_TOKEN_EXPIRATION_HOURS = int(
        data.get("PASSWORD_RECOVERY_TOKEN_EXPIRATION_HOURS", 24)
    )
    SWEEP_ENABLED = bool(data.get("SWEEP_ENABLED", True))
    SWEEP_INTERVAL_SECONDS = int(data.get("SWEEP_INTERVAL_SECONDS", 3600))
    SWEEP_STARTUP_DELAY_SECONDS = int(data.get("SWEEP_STARTUP_DELAY_SECONDS", 0))
