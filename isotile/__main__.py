import argparse
import json
import logging
from typing import List, Optional, Sequence

from isotile import (
    TilingError,
    create_tiling,
    describe_tiling_type,
    iter_tiling_types,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_params(value: Optional[str]) -> Optional[List[float]]:
    if value is None:
        return None
    text = value.strip()
    if not text:
        return []
    try:
        return [float(part) for part in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid parameter list {value!r}") from None


def _cmd_list(args: argparse.Namespace) -> None:
    for desc in iter_tiling_types():
        print(
            f"{desc.name}\tvertices={desc.num_vertices}\tparams={desc.num_parameters}\t"
            f"aspects={desc.num_aspects}\tcolours={desc.num_colours}\t"
            f"edges={''.join(s.value for s in desc.edge_shapes)}"
        )


def _cmd_describe(args: argparse.Namespace) -> None:
    summary = describe_tiling_type(args.type_id)
    tiling = create_tiling(args.type_id)
    if args.params is not None:
        tiling.set_parameters(args.params)
    summary["parameters"] = list(tiling.get_parameters())
    summary["vertices"] = [list(v) for v in tiling.vertices()]
    summary["translation_vectors"] = [
        list(tiling.translation_vector1()),
        list(tiling.translation_vector2()),
    ]
    print(json.dumps(summary, indent=2))


def _cmd_fill(args: argparse.Namespace) -> None:
    tiling = create_tiling(args.type_id)
    if args.params is not None:
        tiling.set_parameters(args.params)
    count = 0
    for tile in tiling.fill_region_bounds(args.xmin, args.ymin, args.xmax, args.ymax):
        colour = tiling.get_colour(tile.t1, tile.t2, tile.aspect)
        coeffs = " ".join(f"{v:.6f}" for v in tile.transform.as_tuple())
        print(f"{tile.t1} {tile.t2} {tile.aspect} {colour} {coeffs}")
        count += 1
    logger.info("Emitted %d tile instance(s) for %s", count, tiling.descriptor.name)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Inspect isohedral tiling types")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List every tiling type")

    describe = subparsers.add_parser("describe", help="Print a JSON summary of one type")
    describe.add_argument("type_id", type=int, help="IH number, e.g. 41")
    describe.add_argument("--params", type=_parse_params, help="Comma separated parameter vector")

    fill = subparsers.add_parser("fill", help="List the tiles covering a rectangle")
    fill.add_argument("type_id", type=int, help="IH number, e.g. 41")
    fill.add_argument("xmin", type=float)
    fill.add_argument("ymin", type=float)
    fill.add_argument("xmax", type=float)
    fill.add_argument("ymax", type=float)
    fill.add_argument("--params", type=_parse_params, help="Comma separated parameter vector")

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    handlers = {"list": _cmd_list, "describe": _cmd_describe, "fill": _cmd_fill}
    try:
        handlers[args.command](args)
    except (TilingError, ValueError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
