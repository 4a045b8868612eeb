"""Configuration loading, validation and command-line overrides."""

import logging

import pytest

from delaychain import cli
from delaychain.config import ConfigError, GUIConfig, load_config


def test_defaults():
    config = GUIConfig()
    assert (config.width, config.height, config.fps) == (480, 800, 60)
    assert config.host_port == 7562
    assert config.listen_port == 7563
    assert config.control_address == '/gui/control'
    assert config.buffer_address == '/gui/buffer'
    assert config.max_frames is None


def test_from_dict_sections():
    config = GUIConfig.from_dict({
        'display': {'width': 800, 'height': 480, 'fullscreen': True, 'backend': 'headless'},
        'link': {'host': '192.168.7.2', 'host_port': 9000},
        'logging': {'level': 'DEBUG'},
    })
    assert (config.width, config.height) == (800, 480)
    assert config.fullscreen is True
    assert config.backend == 'headless'
    assert config.host == '192.168.7.2'
    assert config.host_port == 9000
    assert config.level == 'DEBUG'


def test_empty_file_means_defaults():
    assert GUIConfig.from_dict(None) == GUIConfig()
    assert GUIConfig.from_dict({'display': None}) == GUIConfig()


@pytest.mark.parametrize("config_dict", [
    {'audio': {'rate': 44100}},
    {'display': {'colour': 'red'}},
    {'display': ['width', 480]},
    ['display'],
])
def test_unknown_or_malformed_structure(config_dict):
    with pytest.raises(ConfigError):
        GUIConfig.from_dict(config_dict)


@pytest.mark.parametrize("field, value", [
    ('width', 0),
    ('height', -1),
    ('fps', 1000),
    ('width', 480.5),
    ('fps', True),
    ('host_port', 70000),
    ('brightness', 0.0),
    ('gamma', 5.0),
    ('fullscreen', 'yes'),
    ('backend', 'opengl'),
    ('host', ''),
    ('control_address', 'gui/control'),
    ('level', 'LOUD'),
    ('max_frames', 0),
])
def test_invalid_values(field, value):
    with pytest.raises(ConfigError):
        GUIConfig(**{field: value})


def test_overrides_ignore_none():
    config = GUIConfig().with_overrides(width=1024, height=None, host='localhost')
    assert config.width == 1024
    assert config.height == 800
    assert config.host == 'localhost'


def test_overrides_reject_unknown():
    with pytest.raises(ConfigError):
        GUIConfig().with_overrides(colour='red')


def test_load_yaml_file(tmp_path):
    path = tmp_path / 'gui.yml'
    path.write_text(
        "display:\n"
        "  width: 600\n"
        "  fps: 30\n"
        "link:\n"
        "  listen_port: 9001\n"
    )
    config = load_config(path)
    assert (config.width, config.fps, config.listen_port) == (600, 30, 9001)


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config() == GUIConfig()


def test_default_file_in_working_directory(tmp_path, monkeypatch):
    (tmp_path / 'delaychain.yml').write_text("link:\n  host: pedal.local\n")
    monkeypatch.chdir(tmp_path)
    assert load_config().host == 'pedal.local'


def test_explicit_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / 'nope.yml')


def test_malformed_yaml(tmp_path):
    path = tmp_path / 'bad.yml'
    path.write_text("display: [width: 1\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_cli_arguments_map_to_settings():
    args = cli.build_parser().parse_args([
        '--width', '320', '--fullscreen', '--host-port', '9000', '--frames', '10', '--log-level', 'DEBUG',
    ])
    assert args.width == 320
    assert args.fullscreen is True
    assert args.host_port == 9000
    assert args.max_frames == 10
    assert args.level == 'DEBUG'
    assert args.height is None


def test_cli_rejects_invalid_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--width', '0'])
    assert excinfo.value.code == 2


def test_cli_headless_run(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = cli.main([
        '--backend', 'headless', '--frames', '2', '--fps', '240',
        '--host', '127.0.0.1', '--listen-host', '127.0.0.1', '--listen-port', '0',
    ])
    assert code == 0


@pytest.fixture
def bare_root(monkeypatch):
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, 'handlers', [])
    yield root
    root.setLevel(level)


def test_setup_logging_configures_root(bare_root):
    cli.setup_logging('debug')
    assert bare_root.level == logging.DEBUG
    assert len(bare_root.handlers) == 1


def test_setup_logging_keeps_existing_handlers(bare_root):
    existing = logging.NullHandler()
    bare_root.addHandler(existing)
    bare_root.setLevel(logging.WARNING)

    cli.setup_logging('debug')

    assert bare_root.handlers == [existing]
    assert bare_root.level == logging.WARNING
