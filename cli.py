import argparse
import json
import logging
import sys

from editor.config import DEFAULT_HEIGHT, DEFAULT_MAP_NAME, DEFAULT_WIDTH, HEX_SIZE
from editor.errors import MapError
from editor.session import MapSession
from editor.terrain import DEFAULT_CATALOG

logger = logging.getLogger("cli")


def open_session(path):
    sess = MapSession()
    sess.load_file(path)
    return sess


def cmd_new(args):
    sess = MapSession(width=args.width, height=args.height)
    sess.name = args.name
    sess.save_file(args.out)
    print(f"Map {args.width}x{args.height} saved to {args.out}")


def cmd_paint(args):
    sess = open_session(args.map)
    before = (sess.extent.width, sess.extent.height)
    sess.paint(args.q, args.r, args.terrain)
    sess.save_file(args.map)
    print(f"Painted {args.terrain} at ({args.q},{args.r})")
    if (sess.extent.width, sess.extent.height) != before:
        print(f"Map grew to {sess.extent.width}x{sess.extent.height}")


def cmd_erase(args):
    sess = open_session(args.map)
    sess.erase(args.q, args.r)
    sess.save_file(args.map)
    print(f"Erased ({args.q},{args.r})")


def cmd_expand(args):
    sess = open_session(args.map)
    sess.expand(north=args.north, south=args.south, east=args.east, west=args.west)
    sess.save_file(args.map)
    print(f"Map expanded to {sess.extent.width}x{sess.extent.height}")


def cmd_summary(args):
    sess = open_session(args.map)
    print(json.dumps(sess.summary(), indent=2, sort_keys=True))


def cmd_terrains(args):
    for t in DEFAULT_CATALOG:
        print(f"{t.id:<16} {t.name:<16} #{t.color[0]:02x}{t.color[1]:02x}{t.color[2]:02x} {t.pattern}")


def cmd_export(args):
    sess = open_session(args.map)
    sess.hex_size = args.hex_size
    sess.export_png(args.png)
    print(f"Saved {args.png}")


def build_parser():
    ap = argparse.ArgumentParser(description="Headless CLI for hex terrain maps")
    ap.add_argument("--log-level", default="WARNING")
    sub = ap.add_subparsers()

    ap_new = sub.add_parser("new", help="Create an empty map")
    ap_new.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    ap_new.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    ap_new.add_argument("--name", default=DEFAULT_MAP_NAME)
    ap_new.add_argument("--out", default="hexmap.json")
    ap_new.set_defaults(func=cmd_new)

    ap_paint = sub.add_parser("paint", help="Paint one hex (grows the map near its edge)")
    ap_paint.add_argument("map")
    ap_paint.add_argument("q", type=int)
    ap_paint.add_argument("r", type=int)
    ap_paint.add_argument("terrain", help="Terrain id, see 'terrains'")
    ap_paint.set_defaults(func=cmd_paint)

    ap_erase = sub.add_parser("erase", help="Erase one hex")
    ap_erase.add_argument("map")
    ap_erase.add_argument("q", type=int)
    ap_erase.add_argument("r", type=int)
    ap_erase.set_defaults(func=cmd_erase)

    ap_exp = sub.add_parser("expand", help="Grow the declared map bounds")
    ap_exp.add_argument("map")
    for side in ("north", "south", "east", "west"):
        ap_exp.add_argument(f"--{side}", type=int, default=0)
    ap_exp.set_defaults(func=cmd_expand)

    ap_sum = sub.add_parser("summary", help="Print map summary as JSON")
    ap_sum.add_argument("map")
    ap_sum.set_defaults(func=cmd_summary)

    ap_ter = sub.add_parser("terrains", help="List terrain ids")
    ap_ter.set_defaults(func=cmd_terrains)

    ap_png = sub.add_parser("export", help="Render the declared extent to PNG")
    ap_png.add_argument("--map", required=True, help="Map JSON file")
    ap_png.add_argument("--png", required=True, help="Output PNG path")
    ap_png.add_argument("--hex-size", type=float, default=HEX_SIZE, help="Hex radius in px")
    ap_png.set_defaults(func=cmd_export)
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if not hasattr(args, "func"):
        ap.print_help()
        return 0
    try:
        args.func(args)
    except (MapError, OSError, ValueError) as exc:
        logger.debug("command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
