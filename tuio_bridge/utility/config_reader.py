import configparser
import os

DEFAULT_CONFIG_FILE = 'config.ini'

# (config.ini section, key, environment variable, default)
SETTINGS = {
    'ws_host': ('WEBSOCKET', 'Host', 'WS_HOST', '0.0.0.0'),
    'ws_port': ('WEBSOCKET', 'Port', 'WS_PORT', 8080),
    'udp_host': ('UDP', 'Host', 'UDP_HOST', '127.0.0.1'),
    'udp_port': ('UDP', 'Port', 'UDP_PORT', 3333),
    'log_level': ('LOGGING', 'Level', 'LOG_LEVEL', 'INFO'),
}

PORT_SETTINGS = ('ws_port', 'udp_port')


def read_config(path=DEFAULT_CONFIG_FILE, environ=None):
    """ Read the bridge settings.

        Environment variables win over the config file, the config file wins over the defaults. A missing config file
        is fine, all settings have a default.

        Returns:
            dict with the keys ws_host, ws_port, udp_host, udp_port and log_level
    """
    if environ is None:
        environ = os.environ

    config = configparser.ConfigParser()
    config.read(path)

    settings = {}
    for name, (section, key, env_name, default) in SETTINGS.items():
        value = default
        if config.has_option(section, key):
            value = config.get(section, key)
        if environ.get(env_name):
            value = environ[env_name]

        if name in PORT_SETTINGS:
            value = _parse_port(name, value)
        settings[name] = value

    return settings


def _parse_port(name, value):
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError('{} must be an integer, got {!r}'.format(name, value))
    if not 0 <= port <= 65535:
        raise ValueError('{} must be between 0 and 65535, got {}'.format(name, port))
    return port
