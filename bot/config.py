import os

# --- Telegram Configuration ---
BOT_TOKEN = os.getenv('BOT_TOKEN') or os.getenv('TELEGRAM_BOT_TOKEN')

# --- Logging Configuration ---
LOG_DIR = os.getenv("LOG_DIR", "/app/logs") # Директория для логов внутри контейнера
BOT_LOG_FILE_NAME = "bot.log"
