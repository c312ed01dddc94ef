import json

from .constants import FIELD_VALUE_TEMPLATE, SLACK_USERNAME
from .detection import resolve_presentation
from .models import Attachment, Field, SlackMessage


def build_field_value(incident):
    return FIELD_VALUE_TEMPLATE.format(
        state=incident.state,
        resource_id=incident.resource_id,
        resource_name=incident.resource_name,
    )


def build_slack_message(alert, config):
    incident = alert.incident
    presentation = resolve_presentation(incident)

    text = " ".join([presentation.mention, incident.summary, incident.url])
    attachment = Attachment(
        color=presentation.color,
        fields=[Field(title=incident.summary, value=build_field_value(incident))],
    )

    return SlackMessage(
        text=text,
        username=SLACK_USERNAME,
        channel=config.channel,
        icon_emoji=config.icon_emoji,
        icon_url=config.icon_url,
        attachments=[attachment],
    )


def serialize_message(message):
    return json.dumps(message.to_dict(), ensure_ascii=False, separators=(',', ':'))
