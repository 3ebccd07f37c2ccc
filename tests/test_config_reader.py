import pytest

from tuio_bridge.utility.config_reader import read_config


def write_config(tmp_path, text):
    path = tmp_path / 'config.ini'
    path.write_text(text)
    return str(path)


def test_defaults_without_config_file(tmp_path):
    settings = read_config(str(tmp_path / 'missing.ini'), environ={})

    assert settings == {
        'ws_host': '0.0.0.0',
        'ws_port': 8080,
        'udp_host': '127.0.0.1',
        'udp_port': 3333,
        'log_level': 'INFO',
    }


def test_config_file_overrides_defaults(tmp_path):
    path = write_config(tmp_path, '[UDP]\nHost = 192.168.0.20\nPort = 3334\n\n[LOGGING]\nLevel = DEBUG\n')

    settings = read_config(path, environ={})

    assert settings['udp_host'] == '192.168.0.20'
    assert settings['udp_port'] == 3334
    assert settings['ws_port'] == 8080
    assert settings['log_level'] == 'DEBUG'


def test_environment_overrides_config_file(tmp_path):
    path = write_config(tmp_path, '[WEBSOCKET]\nPort = 9000\n')

    settings = read_config(path, environ={'WS_PORT': '9100', 'UDP_HOST': '10.0.0.5', 'UDP_PORT': ''})

    assert settings['ws_port'] == 9100
    assert settings['udp_host'] == '10.0.0.5'
    # Empty variables are treated as unset
    assert settings['udp_port'] == 3333


@pytest.mark.parametrize('value', ['abc', '70000', '-1'])
def test_invalid_port_is_rejected(tmp_path, value):
    with pytest.raises(ValueError, match='udp_port'):
        read_config(str(tmp_path / 'missing.ini'), environ={'UDP_PORT': value})
