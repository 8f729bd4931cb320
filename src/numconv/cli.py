from __future__ import annotations
import argparse, json, logging, math, re, sys

from .binary.twos_complement import CodecError, decode, encode
from .geo.cartesian import to_cartesian
from .geo.ellipsoid import ELLIPSOIDS, get_ellipsoid
from .geo.errors import InvalidCoordinateError
from .geo.zone import zone_from_lat_lon

logger = logging.getLogger(__name__)

BITS_RE = re.compile(r"^[01]+$")

BAD_BITS_MSG = "Invalid input: Enter only 0s and 1s."
BAD_INPUT_MSG = "Error: Invalid input."


class InputError(ValueError):
    """Raw text could not be parsed into the value a command needs."""


def _parse_int(text: str) -> int:
    try:
        return int(text.strip(), 10)
    except ValueError:
        raise InputError(BAD_INPUT_MSG) from None

def _parse_float(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError:
        raise InputError(BAD_INPUT_MSG) from None
    if math.isnan(value):
        raise InputError(BAD_INPUT_MSG)
    return value


def _emit(args, text: str, payload) -> None:
    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print(text)


def cmd_decode(args):
    bits = args.bits.strip()
    if not BITS_RE.match(bits):
        raise InputError(BAD_BITS_MSG)
    value = decode(bits)
    logger.debug("decode %s -> %d", bits, value)
    _emit(args, str(value), {"bits": bits, "value": value})

def cmd_encode(args):
    value = _parse_int(args.value)
    size = _parse_int(args.size)
    bits = encode(value, size)
    logger.debug("encode %d in %d bits -> %s", value, size, bits)
    _emit(args, bits, {"value": value, "size": size, "bits": bits})

def cmd_xyz(args):
    lat, lon, height = (_parse_float(v) for v in (args.lat, args.lon, args.height))
    ellipsoid = get_ellipsoid(args.ellipsoid)
    p = to_cartesian(lat, lon, height, ellipsoid=ellipsoid)
    logger.debug("xyz on %s: (%s, %s, %s) -> %s", ellipsoid.name, lat, lon, height, p.as_tuple())
    text = "\n".join(f"{k} = {v:.6f}" for k, v in zip("xyz", p.as_tuple()))
    _emit(args, text, p.model_dump(mode="json"))

def cmd_utm_zone(args):
    lat, lon = _parse_float(args.lat), _parse_float(args.lon)
    zd = zone_from_lat_lon(lat, lon, exceptions=args.exceptions)
    logger.debug("utm-zone (%s, %s) exceptions=%s -> %s", lat, lon, args.exceptions, zd)
    _emit(args, f"UTM Zone: {zd.label}", zd.model_dump(mode="json"))


def build_parser():
    p = argparse.ArgumentParser(prog="numconv", description="Two's complement and geodetic conversions")
    p.add_argument("--json", action="store_true", help="Print results as JSON")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("decode", help="two's complement bit string -> decimal")
    sp.add_argument("bits", help="Bit string, MSB first (e.g. 1101)")
    sp.set_defaults(func=cmd_decode)

    sp = sub.add_parser("encode", help="decimal -> two's complement bit string")
    sp.add_argument("value", help="Signed decimal integer")
    sp.add_argument("size", help="Bit width")
    sp.set_defaults(func=cmd_encode)

    # positionals stay raw text; each cmd_* parses its own input
    sp = sub.add_parser("xyz", help="lat/lon/height -> earth-centred x, y, z (m)")
    sp.add_argument("lat")
    sp.add_argument("lon")
    sp.add_argument("height", nargs="?", default="0")
    sp.add_argument("--ellipsoid", default="wgs84", choices=sorted(ELLIPSOIDS))
    sp.set_defaults(func=cmd_xyz)

    sp = sub.add_parser("utm-zone", help="lat/lon -> UTM grid zone designator")
    sp.add_argument("lat")
    sp.add_argument("lon")
    sp.add_argument("--exceptions", action="store_true",
                    help="Apply the Norway/Svalbard irregular zones")
    sp.set_defaults(func=cmd_utm_zone)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("numconv").setLevel(logging.DEBUG if ns.verbose else logging.WARNING)
    try:
        ns.func(ns)
    except InputError as e:
        print(str(e), file=sys.stderr)
        return 1
    except (CodecError, InvalidCoordinateError) as e:
        logger.debug("%s failed: %s", ns.cmd, type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
