#!/usr/bin/env python3
"""Watch a lot snapshot topic and print the reconciled view on every update.

Connects to the broker configured via ``PARKSYNC_*`` environment variables
(or command-line flags), subscribes to the lot topic and prints the sorted
spot list plus aggregates after each snapshot.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path

# Allow running from repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from parksync import LotMonitor, LotUpdate, ParkSyncConfig, SpotStore  # noqa: E402

_LOG = logging.getLogger("watch_lot")


def _print_state(store: SpotStore, update: LotUpdate) -> None:
    agg = store.aggregates()
    print(f"--- revision {update.revision} at {update.received_at.isoformat()}")
    for spot in store.current_spots():
        label = "FREE" if spot.is_available else "OCCUPIED"
        print(f"  {spot.display_id:<8} {spot.distance_cm:>7.1f} cm  {label}")
    if agg.is_full:
        print("  PARKING FULL!")
    else:
        print(
            f"  available={agg.available_count} occupied={agg.occupied_count} "
            f"total={agg.total_count} ratio={agg.occupancy_ratio:.2f}"
        )


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--host", help="Broker host (overrides PARKSYNC_MQTT_HOST)")
    parser.add_argument("--port", type=int, help="Broker port (overrides PARKSYNC_MQTT_PORT)")
    parser.add_argument("--topic", help="Lot snapshot topic (overrides PARKSYNC_MQTT_TOPIC)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args()


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {}
    if args.host:
        overrides["mqtt_host"] = args.host
    if args.port:
        overrides["mqtt_port"] = args.port
    if args.topic:
        overrides["mqtt_topic"] = args.topic
    config = ParkSyncConfig.from_env(**overrides)

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    monitor = LotMonitor.from_config(config)
    monitor.store.subscribe(lambda update: _print_state(monitor.store, update))
    _LOG.info("Watching %s:%s topic=%s", config.mqtt_host, config.mqtt_port, config.mqtt_topic)
    async with monitor:
        await stop_event.wait()
    return 0


def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
