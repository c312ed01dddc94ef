import logging

from stackdriver_relay.controller import create_app
from stackdriver_relay.constants import APP_PORT, DEBUG_MODE

logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE)
