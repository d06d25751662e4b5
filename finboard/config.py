# finboard/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Configurações do Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Configurações do Telegram (apenas envio de mensagens)
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")
TELEGRAM_CHAT_ID = os.getenv("TELEGRAM_CHAT_ID")
INTERNAL_WEBHOOK_SECRET = os.getenv("INTERNAL_WEBHOOK_SECRET")

# Configurações do Flask
# Assina o cookie de sessão; sem ela a aplicação não sobe
FLASK_SECRET_KEY = os.getenv("FLASK_SECRET_KEY")

REQUIRED_ENV_VARS = ["SUPABASE_URL", "SUPABASE_KEY", "FLASK_SECRET_KEY"]


def check_missing_env_vars() -> list:
    """Retorna os nomes das variáveis obrigatórias que não estão definidas."""
    return [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
