"""MQTT snapshot feed: payload decoding and the threaded paho-mqtt runtime."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, cast

import paho.mqtt.client as mqtt

from parksync._redact import redact_for_log
from parksync.config import ParkSyncConfig
from parksync.exceptions import FeedError, FeedPayloadError
from parksync.feed import SnapshotCallback


def decode_snapshot_payload(payload: bytes) -> Any:
    """Decode one MQTT payload into a raw snapshot.

    An empty payload (a cleared retained message) or JSON ``null`` decodes to
    ``None``, meaning "no data yet".

    Raises
    ------
    FeedPayloadError
        If the payload is not UTF-8 JSON.
    """
    if not payload.strip():
        return None
    try:
        return json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise FeedPayloadError(f"Snapshot payload is not JSON: {exc}") from exc


class MqttSnapshotFeed:
    """Threaded paho-mqtt runtime delivering lot snapshots from one topic.

    Deliveries run on paho's network thread unless *loop* is given, in which
    case they are handed to that asyncio loop with ``call_soon_threadsafe``.
    Either way there is exactly one delivering thread, and nothing is
    delivered once :meth:`stop` has returned.
    """

    def __init__(
        self,
        config: ParkSyncConfig,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._loop = loop
        self._logger = logger or logging.getLogger(__name__)
        self._client: mqtt.Client | None = None
        self._on_snapshot: SnapshotCallback | None = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """Whether the MQTT runtime is actively running."""
        return self._running

    @property
    def topic(self) -> str:
        return self._config.mqtt_topic

    def _build_client(self) -> mqtt.Client:
        client = mqtt.Client(
            callback_api_version=cast(Any, mqtt).CallbackAPIVersion.VERSION2,
            client_id=self._config.client_id,
        )
        client.enable_logger(self._logger)
        if self._config.mqtt_username:
            client.username_pw_set(self._config.mqtt_username, self._config.mqtt_password)
        if self._config.mqtt_tls:
            client.tls_set()
        client.on_connect = self._on_connect
        client.on_message = self._on_message
        client.on_disconnect = self._on_disconnect
        return client

    def start(self, on_snapshot: SnapshotCallback) -> None:
        """Connect, subscribe and start delivering snapshots to *on_snapshot*.

        Raises
        ------
        FeedError
            If the broker connection cannot be opened.
        """
        self.stop()
        self._logger.debug(
            "MQTT feed start requested host=%s port=%s topic=%s client_id=%s",
            self._config.mqtt_host,
            self._config.mqtt_port,
            self._config.mqtt_topic,
            self._config.client_id,
        )
        self._on_snapshot = on_snapshot
        client = self._build_client()
        try:
            client.connect(self._config.mqtt_host, self._config.mqtt_port, keepalive=self._config.mqtt_keepalive)
        except OSError as exc:
            self._on_snapshot = None
            raise FeedError(
                f"Cannot connect to {self._config.mqtt_host}:{self._config.mqtt_port}: {exc}",
                topic=self._config.mqtt_topic,
            ) from exc
        client.loop_start()

        self._client = client
        self._running = True
        self._logger.debug("MQTT network loop started")

    def stop(self) -> None:
        """Stop and disconnect current MQTT client if running."""
        client = self._client
        self._client = None
        was_running = self._running
        self._running = False
        self._on_snapshot = None

        if client is None:
            return
        try:
            if was_running:
                self._logger.debug("MQTT disconnect requested")
                client.disconnect()
        finally:
            client.loop_stop()
            self._logger.debug("MQTT network loop stopped")

    def _on_connect(
        self,
        c: mqtt.Client,
        _userdata: Any,
        _flags: Any,
        reason_code: Any,
        _properties: Any,
    ) -> None:
        if reason_code.value != 0:
            self._logger.warning("MQTT connect failed: %s", reason_code)
            return
        self._logger.debug("MQTT connected; subscribing topic=%s", self._config.mqtt_topic)
        c.subscribe(self._config.mqtt_topic, qos=1)

    def _on_message(self, _c: mqtt.Client, _userdata: Any, msg: mqtt.MQTTMessage) -> None:
        callback = self._on_snapshot
        if callback is None:
            return
        try:
            snapshot = decode_snapshot_payload(msg.payload)
        except FeedPayloadError:
            self._logger.debug("MQTT payload decode failure topic=%s", msg.topic, exc_info=True)
            return
        self._logger.debug("Received snapshot topic=%s parsed=%s", msg.topic, redact_for_log(snapshot))

        if self._loop is not None:
            self._loop.call_soon_threadsafe(self._deliver, callback, snapshot)
        else:
            self._deliver(callback, snapshot)

    def _deliver(self, callback: SnapshotCallback, snapshot: Any) -> None:
        # A stop() or restart between queueing and running discards the delivery.
        if self._on_snapshot is not callback:
            self._logger.debug("Dropping snapshot delivered after feed stopped")
            return
        callback(snapshot)

    def _on_disconnect(
        self,
        _client: mqtt.Client,
        _userdata: Any,
        _disconnect_flags: Any,
        reason_code: Any,
        _properties: Any,
    ) -> None:
        if self._running:
            self._logger.debug("MQTT disconnected: %s", reason_code)
