"""Runtime configuration for parksync."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from parksync.exceptions import ParkSyncConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, cast: type[int] | type[float]) -> int | float:
    try:
        return cast(value)
    except ValueError as exc:
        raise ParkSyncConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class ParkSyncConfig:
    """Feed and monitor configuration.

    Parameters
    ----------
    mqtt_host : str
        Hostname of the broker publishing lot snapshots.
    mqtt_port : int
        Broker port. Defaults to ``1883``.
    mqtt_topic : str
        Topic carrying the complete "all spots under the lot" snapshot.
    mqtt_username : str or None
        Broker username, if the broker requires authentication.
    mqtt_password : str or None
        Broker password.
    mqtt_tls : bool
        Wrap the broker connection in TLS.
    mqtt_keepalive : int
        MQTT keepalive in seconds.
    client_id : str
        MQTT client identifier. Empty lets the broker assign one.
    """

    mqtt_host: str = "localhost"
    mqtt_port: int = 1883
    mqtt_topic: str = "park2/spots"
    mqtt_username: str | None = None
    mqtt_password: str | None = None
    mqtt_tls: bool = False
    mqtt_keepalive: int = 60
    client_id: str = ""

    @classmethod
    def from_env(cls, **overrides: Any) -> ParkSyncConfig:
        """Create configuration from ``PARKSYNC_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        ParkSyncConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PARKSYNC_MQTT_HOST": "mqtt_host",
            "PARKSYNC_MQTT_TOPIC": "mqtt_topic",
            "PARKSYNC_MQTT_USERNAME": "mqtt_username",
            "PARKSYNC_MQTT_PASSWORD": "mqtt_password",
            "PARKSYNC_CLIENT_ID": "client_id",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        port_env = env.get("PARKSYNC_MQTT_PORT")
        if port_env is not None and "mqtt_port" not in overrides:
            config_kwargs["mqtt_port"] = _env_number("PARKSYNC_MQTT_PORT", port_env, int)

        keepalive_env = env.get("PARKSYNC_MQTT_KEEPALIVE")
        if keepalive_env is not None and "mqtt_keepalive" not in overrides:
            config_kwargs["mqtt_keepalive"] = _env_number("PARKSYNC_MQTT_KEEPALIVE", keepalive_env, int)

        if "mqtt_tls" not in overrides:
            config_kwargs["mqtt_tls"] = _env_bool(env.get("PARKSYNC_MQTT_TLS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
