import os
from dataclasses import dataclass
from typing import Optional

# Configurações globais de ambiente (lidas uma vez no start do processo)
WEBHOOK_URL = os.getenv("WEBHOOK_URL")
CHANNEL = os.getenv("CHANNEL", "")
SLACK_ICON_EMOJI = os.getenv("SLACK_ICON_EMOJI", "")
SLACK_ICON_URL = os.getenv("SLACK_ICON_URL", "")
_timeout_env = os.getenv("WEBHOOK_TIMEOUT_SECONDS", "").strip()
WEBHOOK_TIMEOUT_SECONDS = float(_timeout_env) if _timeout_env else None
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

SLACK_USERNAME = "Alert by Stackdriver"

# Cores do attachment por nível
COLORS = {
    "danger": "#fc2f2f",
    "warn": "#ffcc14",
    "health": "#27d871",
}

# Menções do Slack
MENTION_HERE = "<!here>"
MENTION_CHANNEL = "<!channel>"

DANGER_MARKER = "[DANGER]"
CLOSED_STATE = "closed"

FIELD_VALUE_TEMPLATE = "state: {state}\nresources_id: {resource_id}\nresources_name: {resource_name}"


@dataclass(frozen=True)
class RelayConfig:
    webhook_url: Optional[str] = None
    channel: str = ""
    icon_emoji: str = ""
    icon_url: str = ""
    timeout: Optional[float] = None


def load_config() -> RelayConfig:
    """Monta a configuração a partir do ambiente. Nada é validado aqui:
    sem WEBHOOK_URL o primeiro envio falha em tempo de execução."""
    return RelayConfig(
        webhook_url=WEBHOOK_URL,
        channel=CHANNEL,
        icon_emoji=SLACK_ICON_EMOJI,
        icon_url=SLACK_ICON_URL,
        timeout=WEBHOOK_TIMEOUT_SECONDS,
    )
