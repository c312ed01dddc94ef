import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Exemplo de payload enviado pelo Stackdriver:
# {
#   "incident": {
#     "incident_id": "f2e08c333dc64cb09f75eaab355393bz",
#     "resource_id": "i-4a266a2d",
#     "resource_name": "webserver-85",
#     "state": "open",
#     "started_at": 1385085727,
#     "ended_at": null,
#     "policy_name": "Webserver Health",
#     "condition_name": "CPU usage",
#     "url": "https://app.google.stackdriver.com/incidents/f333dc64z",
#     "summary": "CPU for webserver-85 is above the threshold of 1% with a value of 28.5%"
#   },
#   "version": 1.1
# }

_TEXT_FIELDS = (
    'incident_id',
    'resource_id',
    'resource_name',
    'state',
    'policy_name',
    'condition_name',
    'url',
    'summary',
)
_TIMESTAMP_FIELDS = ('started_at', 'ended_at')


def _text(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"campo '{key}' deveria ser texto, recebido {type(value).__name__}")
    return value


def _timestamp(data: Dict[str, Any], key: str) -> Optional[int]:
    value = data.get(key)
    if value is None:
        return None
    # bool é subclasse de int em Python
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"campo '{key}' deveria ser inteiro, recebido {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Incident:
    incident_id: str = ""
    resource_id: str = ""
    resource_name: str = ""
    state: str = ""
    started_at: Optional[int] = None
    ended_at: Optional[int] = None
    policy_name: str = ""
    condition_name: str = ""
    url: str = ""
    summary: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Incident":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("'incident' deveria ser um objeto JSON")
        values = {key: _text(data, key) for key in _TEXT_FIELDS}
        values.update({key: _timestamp(data, key) for key in _TIMESTAMP_FIELDS})
        return cls(**values)


@dataclass(frozen=True)
class Alert:
    incident: Incident = field(default_factory=Incident)
    version: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "Alert":
        if not isinstance(data, dict):
            raise ValueError("o corpo do alerta deveria ser um objeto JSON")

        version = data.get('version')
        if version is None:
            version = 0.0
        elif isinstance(version, bool) or not isinstance(version, (int, float)):
            raise ValueError(f"campo 'version' deveria ser numérico, recebido {type(version).__name__}")

        return cls(incident=Incident.from_dict(data.get('incident')), version=float(version))


def decode_alert(raw) -> Alert:
    """Decodifica o corpo da requisição (str ou bytes) em um Alert.
    Levanta ValueError para JSON inválido ou campos com tipo errado."""
    try:
        data = json.loads(raw)
    except RecursionError as exc:
        raise ValueError(f"JSON aninhado demais: {exc}") from exc
    return Alert.from_dict(data)


@dataclass
class Field:
    title: str
    value: str
    short: bool = False

    def to_dict(self):
        return {'title': self.title, 'value': self.value, 'short': self.short}


@dataclass
class Attachment:
    color: str
    fields: List[Field] = field(default_factory=list)

    def to_dict(self):
        return {'color': self.color, 'fields': [f.to_dict() for f in self.fields]}


@dataclass
class SlackMessage:
    """Parâmetro `payload` enviado ao webhook do Slack.

    A ordem das chaves em to_dict() é fixa para que a mesma entrada gere
    sempre o mesmo JSON.
    """
    text: str
    username: str
    channel: str
    icon_emoji: str = ""
    icon_url: str = ""
    attachments: List[Attachment] = field(default_factory=list)

    def to_dict(self):
        return {
            'text': self.text,
            'username': self.username,
            'icon_emoji': self.icon_emoji,
            'icon_url': self.icon_url,
            'channel': self.channel,
            'attachments': [a.to_dict() for a in self.attachments],
        }
