"""Command-line inspector for pinned layout definitions."""

import argparse
import logging
from pathlib import Path

import numpy as np

from .core.span import resolve_spans, span_sizes
from .layout import Pinned, PinnedLoader
from .render import BoxConstraints, LeafBox, Size


def _get_assets_dir() -> Path:
    """Get the bundled layout definitions directory."""
    return Path(__file__).parent.parent.parent / "assets" / "layouts"


def _load_definition(ref: str) -> Pinned:
    """Load a definition by file path or by bundled asset name."""
    loader = PinnedLoader()
    path = Path(ref)
    if not path.exists():
        path = _get_assets_dir() / f"{ref}.yaml"
    return loader.load(path)


def parse_size(text: str) -> Size:
    """Parse a WxH string into a Size."""
    try:
        width, height = (float(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got '{text}'") from None
    return Size(width, height)


def parse_range(text: str) -> np.ndarray:
    """Parse a START:STOP:STEP string into an inclusive array of lengths."""
    try:
        start, stop, step = (float(part) for part in text.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected START:STOP:STEP, got '{text}'") from None
    if step <= 0:
        raise argparse.ArgumentTypeError(f"step must be positive, got {step}")
    return np.arange(start, stop + step / 2, step, dtype=np.float64)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pinlayout",
        description="Pinlayout - resolve pinned layout definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "definition",
        help="Path to a YAML definition, or the name of a bundled one",
    )
    parser.add_argument(
        "-s", "--size",
        metavar="WxH",
        type=parse_size,
        action="append",
        help="Parent size to lay out in; may be repeated (default: 200x200)",
    )
    parser.add_argument(
        "--sweep-width",
        metavar="START:STOP:STEP",
        type=parse_range,
        help="Resolve the horizontal pin across a range of parent widths",
    )
    parser.add_argument(
        "--sweep-height",
        metavar="START:STOP:STEP",
        type=parse_range,
        help="Resolve the vertical pin across a range of parent heights",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each layout pass",
    )
    return parser.parse_args(argv)


def _print_sweep(label: str, pin, lengths: np.ndarray) -> None:
    starts, ends = resolve_spans(pin, lengths)
    sizes = span_sizes(starts, ends)
    print(f"\n{label} sweep:")
    print(f"  {'length':>10} {'start':>10} {'end':>10} {'size':>10}")
    for length, start, end, size in zip(lengths, starts, ends, sizes):
        print(f"  {length:>10.2f} {start:>10.2f} {end:>10.2f} {size:>10.2f}")


def main(argv: list[str] | None = None) -> int:
    """Run the pinlayout inspector."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    pinned = _load_definition(args.definition)
    sizes = args.size or [Size(200.0, 200.0)]

    print(pinned)

    box = pinned.create_render_object()
    box.child = LeafBox(name=f"{pinned.name}_child")

    for size in sizes:
        box.layout(BoxConstraints.tight(size))
        rect = box.child_rect()
        print(
            f"\nparent {size.width:g}x{size.height:g}: "
            f"child at ({rect.left:g}, {rect.top:g}) "
            f"size {rect.width:g}x{rect.height:g} "
            f"right {rect.right:g} bottom {rect.bottom:g}"
        )

    if args.sweep_width is not None:
        _print_sweep("Width", pinned.h_pin, args.sweep_width)
    if args.sweep_height is not None:
        _print_sweep("Height", pinned.v_pin, args.sweep_height)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
