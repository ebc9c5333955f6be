import pytest

from settings import Config, load_config


def test_defaults_when_environment_empty():
    cfg = load_config({})
    assert cfg == Config()
    assert cfg.docker_sock == '/var/run/docker.sock'
    assert cfg.container_label == 'all'
    assert cfg.interval == 5
    assert cfg.start_period == 0
    assert cfg.default_stop_timeout == '10'
    assert cfg.request_timeout == 30
    assert cfg.webhook_url == ''
    assert cfg.webhook_key == 'text'
    assert cfg.metrics_port == 2333
    assert cfg.metrics_enabled is True


def test_values_read_from_environment():
    cfg = load_config({
        'DOCKER_SOCK': '/run/docker.sock',
        'AUTOHEAL_CONTAINER_LABEL': 'critical',
        'AUTOHEAL_INTERVAL': '12',
        'AUTOHEAL_START_PERIOD': '60',
        'AUTOHEAL_DEFAULT_STOP_TIMEOUT': '25',
        'CURL_TIMEOUT': '7',
        'WEBHOOK_URL': 'https://hooks.example.com/x',
        'WEBHOOK_KEY': 'content',
        'METRICS_PORT': '9100',
        'METRICS_ENABLED': 'false',
    })
    assert cfg.docker_sock == '/run/docker.sock'
    assert cfg.container_label == 'critical'
    assert cfg.interval == 12
    assert cfg.start_period == 60
    assert cfg.default_stop_timeout == '25'
    assert cfg.request_timeout == 7
    assert cfg.webhook_url == 'https://hooks.example.com/x'
    assert cfg.webhook_key == 'content'
    assert cfg.metrics_port == 9100
    assert cfg.metrics_enabled is False


def test_unparsable_numbers_fall_back_to_defaults():
    cfg = load_config({
        'AUTOHEAL_INTERVAL': 'soon',
        'AUTOHEAL_START_PERIOD': '1.5',
        'CURL_TIMEOUT': '',
        'METRICS_PORT': 'http',
    })
    assert cfg.interval == 5
    assert cfg.start_period == 0
    assert cfg.request_timeout == 30
    assert cfg.metrics_port == 2333


def test_metrics_enabled_only_for_literal_true():
    assert load_config({'METRICS_ENABLED': 'TRUE'}).metrics_enabled is False
    assert load_config({'METRICS_ENABLED': 'true'}).metrics_enabled is True


def test_filters_without_label_restriction():
    assert Config().filters() == {'health': ['unhealthy']}


def test_filters_with_label_restriction():
    cfg = Config(container_label='critical')
    assert cfg.filters() == {'health': ['unhealthy'], 'label': ['critical=true']}


def test_negative_durations_clamped_to_zero():
    cfg = load_config({'AUTOHEAL_INTERVAL': '-1', 'AUTOHEAL_START_PERIOD': '-30'})
    assert cfg.interval == 0
    assert cfg.start_period == 0


@pytest.mark.parametrize('value', ['0', '-5'])
def test_non_positive_request_timeout_means_no_timeout(value):
    assert load_config({'CURL_TIMEOUT': value}).request_timeout is None
