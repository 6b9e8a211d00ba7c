#!/usr/bin/env python3
from datetime import datetime, timezone

from flask import Flask, jsonify
from werkzeug.serving import make_server

HOST = '0.0.0.0'
PORT = 3000
GREETING = 'Hello, World!'

app = Flask(__name__)


def health_payload(now=None):
    """Build the health-check body. ``now`` defaults to the current UTC time."""
    if now is None:
        now = datetime.now(timezone.utc)
    return {
        'status': 'OK',
        'message': 'Server is running',
        'timestamp': now.isoformat(),
    }


@app.route('/')
def home():
    return GREETING, 200, {'Content-Type': 'text/plain; charset=utf-8'}


@app.route('/api/health')
def health():
    return jsonify(health_payload())


def create_server(host=HOST, port=PORT):
    return make_server(host, port, app, threaded=True)


def main():
    server = create_server(HOST, PORT)
    print(f'Server is running on http://localhost:{PORT}', flush=True)
    server.serve_forever()


if __name__ == '__main__':
    main()
