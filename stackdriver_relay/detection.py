from typing import Callable, NamedTuple

from .constants import COLORS, MENTION_HERE, MENTION_CHANNEL, DANGER_MARKER, CLOSED_STATE
from .models import Incident


class Presentation(NamedTuple):
    color: str
    mention: str


class PresentationRule(NamedTuple):
    name: str
    predicate: Callable[[Incident], bool]
    presentation: Presentation


def is_danger_incident(incident: Incident) -> bool:
    return incident.condition_name.startswith(DANGER_MARKER)


def is_closed_incident(incident: Incident) -> bool:
    return incident.state == CLOSED_STATE


DEFAULT_PRESENTATION = Presentation(color=COLORS["warn"], mention=MENTION_HERE)

# Avaliadas em ordem, a primeira que casar vence: [DANGER] tem prioridade sobre closed
PRESENTATION_RULES = (
    PresentationRule("danger", is_danger_incident, Presentation(COLORS["danger"], MENTION_CHANNEL)),
    PresentationRule("closed", is_closed_incident, Presentation(COLORS["health"], MENTION_HERE)),
)


def resolve_presentation(incident: Incident, rules=PRESENTATION_RULES) -> Presentation:
    for rule in rules:
        if rule.predicate(incident):
            return rule.presentation
    return DEFAULT_PRESENTATION
