from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler

from sonoffkit import config
from sonoffkit.api.device import SonoffDevice
from sonoffkit.devices.bulb import SonoffBulb
from sonoffkit.devices.dimmer import SonoffDimmer
from sonoffkit.devices.power_meter import SonoffPowerMeter
from sonoffkit.devices.relay import SonoffRelay
from sonoffkit.devices.switch import SonoffSwitch
from sonoffkit.errors import InvalidCommand, SonoffError
from sonoffkit.models.bulb import BulbColor
from sonoffkit.models.relay import OutletPulse, OutletStartup, OutletSwitch

_LOGGER = logging.getLogger(__name__)


def _print_kv(console: Console, **values: Any) -> None:
    for key, value in values.items():
        console.print(f"{key}={'' if value is None else value}", markup=False, highlight=False, soft_wrap=True)


def cmd_info(dev: SonoffDevice, args: argparse.Namespace, out: Console) -> None:
    info = dev.get_info()
    _print_kv(
        out,
        deviceid=info.deviceid,
        ssid=info.ssid,
        bssid=info.bssid,
        signal_strength=info.signal_strength,
        fw_version=info.fw_version,
        ota_unlock=info.ota_unlock,
    )


def cmd_wifi(dev: SonoffDevice, args: argparse.Namespace, out: Console) -> None:
    dev.set_wifi(args.ssid, args.password)


def _switchable_action(device, action: str, args: argparse.Namespace) -> bool:
    # on/off/toggle/startup, shared by switch, bulb and dimmer
    if action == "on":
        device.on()
    elif action == "off":
        device.off()
    elif action == "toggle":
        device.toggle()
    elif action == "startup":
        device.set_startup(args.state)
    else:
        return False
    return True


def cmd_switch(dev: SonoffDevice, args: argparse.Namespace, out: Console) -> None:
    if not args.action:
        raise InvalidCommand("Invalid switch command")
    switch = SonoffSwitch(dev)
    if _switchable_action(switch, args.action, args):
        return
    if args.action == "get":
        out.print(str(switch.get_switch()).lower(), highlight=False)
    elif args.action == "pulse":
        switch.pulse(args.milliseconds)


def cmd_bulb(dev: SonoffDevice, args: argparse.Namespace, out: Console) -> None:
    if not args.action:
        raise InvalidCommand("Invalid bulb command")
    bulb = SonoffBulb(dev)
    if _switchable_action(bulb, args.action, args):
        return
    if args.action == "get":
        info = bulb.get_info()
        _print_kv(out, switch=info.switch, ltype=info.ltype)
        if isinstance(info.mode, BulbColor):
            _print_kv(out, brightness=info.mode.br, red=info.mode.r, green=info.mode.g, blue=info.mode.b)
        else:
            _print_kv(out, brightness=info.mode.br, temperature=info.mode.ct)
    elif args.action == "rgb":
        bulb.color(args.brightness, args.red, args.green, args.blue)
    elif args.action == "white":
        bulb.white(args.brightness, args.temperature)


def cmd_dimmer(dev: SonoffDevice, args: argparse.Namespace, out: Console) -> None:
    if not args.action:
        raise InvalidCommand("Invalid dimmer command")
    dimmer = SonoffDimmer(dev)
    if _switchable_action(dimmer, args.action, args):
        return
    if args.action == "get":
        info = dimmer.get_info()
        _print_kv(out, switch=info.switch, brightness=info.brightness)
    elif args.action == "dim":
        dimmer.dim(args.brightness)


def cmd_relay(dev: SonoffDevice, args: argparse.Namespace, out: Console) -> None:
    if not args.action:
        raise InvalidCommand("Invalid relay command")
    relay = SonoffRelay(dev)
    if args.action == "get":
        for outlet, is_on in sorted(relay.get_info().switch_states().items()):
            _print_kv(out, **{f"outlet{outlet}": "on" if is_on else "off"})
    elif args.action == "set":
        relay.set_switches([OutletSwitch(outlet=args.outlet, switch=args.state)])
    elif args.action == "startup":
        relay.set_startup([OutletStartup(outlet=args.outlet, startup=args.state)])
    elif args.action == "pulse":
        relay.set_pulses([OutletPulse(outlet=args.outlet, pulse=args.state, switch=args.switch, width=args.width)])


def cmd_meter(dev: SonoffDevice, args: argparse.Namespace, out: Console) -> None:
    if not args.action:
        raise InvalidCommand("Invalid meter command")
    meter = SonoffPowerMeter(dev)
    if args.action == "subdevs":
        for sub in meter.get_subdevs().sub_dev_list:
            _print_kv(out, **{sub.sub_dev_id: sub.type})
    elif args.action == "status":
        if args.sub_dev_id:
            st = meter.subdev_status(args.sub_dev_id)
            _print_kv(out, fw_version=st.fw_version)
            for outlet, is_on in sorted(st.switch_states().items()):
                _print_kv(out, **{f"outlet{outlet}": "on" if is_on else "off"})
            for channel, reading in sorted(st.readings.items()):
                _print_kv(out, **{f"{k}_{channel:02d}": v for k, v in reading.model_dump(by_alias=True).items()})
        else:
            st = meter.status()
            _print_kv(out, **st.model_dump())
    elif args.action == "set":
        meter.set_switches(args.sub_dev_id, [OutletSwitch(outlet=args.outlet, switch=args.state)])


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sonoff", description="Control Sonoff devices over their local LAN API")
    p.add_argument("--debug", action="store_true", help="Log requests and responses")
    p.add_argument("--id", default=config.device_id(), help="Device id sent in the request envelope")
    # None falls back to SONOFF_TIMEOUT inside main, where a bad value is reported
    p.add_argument("--timeout", type=float, default=None, help="HTTP timeout seconds")
    p.add_argument("address", help="Address of device, e.g. http://192.168.1.50:8081")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="Get information about the device")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("wifi", help="Set device Wi-Fi network")
    sp.add_argument("ssid")
    sp.add_argument("password")
    sp.set_defaults(func=cmd_wifi)

    def _add_switchable(actions: argparse._SubParsersAction, startup: bool = True) -> None:
        actions.add_parser("on")
        actions.add_parser("off")
        actions.add_parser("toggle")
        actions.add_parser("get")
        if startup:
            ap = actions.add_parser("startup", help="Set startup state (\"on\", \"off\", or \"stay\")")
            ap.add_argument("state")

    sp = sub.add_parser("switch", help="Get or set switch state on switchable devices")
    actions = sp.add_subparsers(dest="action")
    _add_switchable(actions)
    ap = actions.add_parser("pulse", help="Pulse width in ms (multiples of 500), 0 disables")
    ap.add_argument("milliseconds", type=int)
    sp.set_defaults(func=cmd_switch)

    sp = sub.add_parser("bulb", help="Get or set settings on bulb devices")
    actions = sp.add_subparsers(dest="action")
    _add_switchable(actions, startup=False)
    ap = actions.add_parser("rgb")
    for name in ("brightness", "red", "green", "blue"):
        ap.add_argument(name, type=int)
    ap = actions.add_parser("white")
    ap.add_argument("brightness", type=int)
    ap.add_argument("temperature", type=int)
    sp.set_defaults(func=cmd_bulb)

    sp = sub.add_parser("dimmer", help="Get or set settings on dimmer devices")
    actions = sp.add_subparsers(dest="action")
    _add_switchable(actions)
    ap = actions.add_parser("dim")
    ap.add_argument("brightness", type=int)
    sp.set_defaults(func=cmd_dimmer)

    sp = sub.add_parser("relay", help="Multi-outlet relays")
    actions = sp.add_subparsers(dest="action")
    actions.add_parser("get")
    ap = actions.add_parser("set")
    ap.add_argument("outlet", type=int)
    ap.add_argument("state", choices=["on", "off"])
    ap = actions.add_parser("startup")
    ap.add_argument("outlet", type=int)
    ap.add_argument("state")
    ap = actions.add_parser("pulse", help="Inching: flip the outlet back after WIDTH ms")
    ap.add_argument("outlet", type=int)
    ap.add_argument("state", choices=["on", "off"], help="Turn inching on or off for the outlet")
    ap.add_argument("width", type=int, help="Pulse width in ms (multiples of 500)")
    ap.add_argument(
        "--switch",
        choices=["on", "off"],
        default="off",
        help="Switch state sent alongside the pulse setting (default: off)",
    )
    sp.set_defaults(func=cmd_relay)

    sp = sub.add_parser("meter", help="Power-meter hubs and their sub-devices")
    actions = sp.add_subparsers(dest="action")
    actions.add_parser("subdevs")
    ap = actions.add_parser("status")
    ap.add_argument("sub_dev_id", nargs="?")
    ap = actions.add_parser("set")
    ap.add_argument("sub_dev_id")
    ap.add_argument("outlet", type=int)
    ap.add_argument("state", choices=["on", "off"])
    sp.set_defaults(func=cmd_meter)

    return p


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.debug)
    err = Console(stderr=True)
    try:
        if not getattr(args, "func", None):
            raise InvalidCommand("No command")
        timeout = config.timeout() if args.timeout is None else args.timeout
        dev = SonoffDevice(args.address, id=args.id, timeout=timeout)
        args.func(dev, args, Console(soft_wrap=True))
    except SonoffError as e:
        _LOGGER.debug("command failed", exc_info=True)
        err.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
