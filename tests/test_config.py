from __future__ import annotations

import pytest

from parksync.config import ParkSyncConfig
from parksync.exceptions import ParkSyncConfigError


def test_defaults() -> None:
    config = ParkSyncConfig()

    assert config.mqtt_host == "localhost"
    assert config.mqtt_port == 1883
    assert config.mqtt_topic == "park2/spots"
    assert config.mqtt_tls is False


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PARKSYNC_MQTT_HOST", "broker.example.com")
    monkeypatch.setenv("PARKSYNC_MQTT_PORT", "8883")
    monkeypatch.setenv("PARKSYNC_MQTT_TOPIC", "lots/north/spots")
    monkeypatch.setenv("PARKSYNC_MQTT_USERNAME", "sensor")
    monkeypatch.setenv("PARKSYNC_MQTT_PASSWORD", "secret")
    monkeypatch.setenv("PARKSYNC_MQTT_TLS", "yes")
    monkeypatch.setenv("PARKSYNC_MQTT_KEEPALIVE", "30")

    config = ParkSyncConfig.from_env()

    assert config.mqtt_host == "broker.example.com"
    assert config.mqtt_port == 8883
    assert config.mqtt_topic == "lots/north/spots"
    assert config.mqtt_username == "sensor"
    assert config.mqtt_password == "secret"
    assert config.mqtt_tls is True
    assert config.mqtt_keepalive == 30


def test_overrides_win_over_env(monkeypatch) -> None:
    monkeypatch.setenv("PARKSYNC_MQTT_PORT", "not-a-port")
    monkeypatch.setenv("PARKSYNC_MQTT_TLS", "true")

    config = ParkSyncConfig.from_env(mqtt_port=1884, mqtt_tls=False)

    assert config.mqtt_port == 1884
    assert config.mqtt_tls is False


def test_invalid_number_raises_config_error(monkeypatch) -> None:
    monkeypatch.setenv("PARKSYNC_MQTT_KEEPALIVE", "soon")

    with pytest.raises(ParkSyncConfigError, match="PARKSYNC_MQTT_KEEPALIVE"):
        ParkSyncConfig.from_env()


def test_unrecognised_bool_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("PARKSYNC_MQTT_TLS", "maybe")

    assert ParkSyncConfig.from_env().mqtt_tls is False
