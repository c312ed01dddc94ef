#!/usr/bin/env python3
import sys
import os
import json
import unittest
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from stackdriver_relay.constants import RelayConfig
from stackdriver_relay.formatters import build_field_value, build_slack_message, serialize_message
from stackdriver_relay.models import Alert, Incident, decode_alert

CONFIG = RelayConfig(webhook_url='https://hooks.slack.test/x', channel='#alerts')


def _alert(**incident):
    return Alert(incident=Incident(**incident), version=1.1)


class TestBuildSlackMessage(unittest.TestCase):
    def test_danger_example(self):
        alert = _alert(state='open', condition_name='[DANGER] CPU', resource_id='i-1',
                       resource_name='web-1', summary='CPU high', url='http://x')
        message = build_slack_message(alert, CONFIG)

        self.assertEqual(message.text, '<!channel> CPU high http://x')
        self.assertEqual(message.username, 'Alert by Stackdriver')
        self.assertEqual(message.channel, '#alerts')
        self.assertEqual(len(message.attachments), 1)
        attachment = message.attachments[0]
        self.assertEqual(attachment.color, '#fc2f2f')
        self.assertEqual(len(attachment.fields), 1)
        self.assertEqual(attachment.fields[0].title, 'CPU high')
        self.assertEqual(attachment.fields[0].value, 'state: open\nresources_id: i-1\nresources_name: web-1')
        self.assertFalse(attachment.fields[0].short)

    def test_closed_example(self):
        alert = _alert(state='closed', condition_name='CPU', summary='CPU ok', url='http://x')
        message = build_slack_message(alert, CONFIG)
        self.assertEqual(message.text, '<!here> CPU ok http://x')
        self.assertEqual(message.attachments[0].color, '#27d871')

    def test_icons_come_from_config(self):
        config = RelayConfig(channel='#c', icon_emoji=':fire:', icon_url='http://icon')
        message = build_slack_message(_alert(), config)
        self.assertEqual(message.icon_emoji, ':fire:')
        self.assertEqual(message.icon_url, 'http://icon')

    def test_field_value_template(self):
        value = build_field_value(Incident(state='closed', resource_id='r', resource_name='n'))
        self.assertEqual(value, 'state: closed\nresources_id: r\nresources_name: n')


class TestSerializeMessage(unittest.TestCase):
    def test_key_order_is_stable(self):
        payload = serialize_message(build_slack_message(_alert(summary='s'), CONFIG))
        data = json.loads(payload)
        self.assertEqual(list(data), ['text', 'username', 'icon_emoji', 'icon_url', 'channel', 'attachments'])
        self.assertEqual(list(data['attachments'][0]), ['color', 'fields'])
        self.assertEqual(list(data['attachments'][0]['fields'][0]), ['title', 'value', 'short'])
        self.assertEqual(data['icon_emoji'], '')

    def test_same_input_gives_identical_bytes(self):
        raw = '{"incident": {"state": "open", "summary": "Uso de CPU alto", "url": "http://x"}, "version": 1}'
        first = serialize_message(build_slack_message(decode_alert(raw), CONFIG))
        second = serialize_message(build_slack_message(decode_alert(raw), CONFIG))
        self.assertEqual(first, second)

    def test_non_ascii_kept(self):
        payload = serialize_message(build_slack_message(_alert(summary='memória'), CONFIG))
        self.assertIn('memória', payload)


if __name__ == '__main__':
    unittest.main()
