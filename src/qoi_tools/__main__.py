import argparse
import logging
from typing import Optional

from PIL import Image

from qoi_tools import QOIImage
from qoi_tools.constants import ColorSpace
from qoi_tools.version import __version__

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="qoi-tools command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser(
        "encode", aliases=["enc"], help="Encode an image file as QOI"
    )
    encode_parser.add_argument("input_file", help="Input image file")
    encode_parser.add_argument("output_file", help="Output QOI file")
    encode_parser.add_argument(
        "--linear",
        action="store_true",
        help="Mark the image as linear instead of sRGB.",
    )

    decode_parser = subparsers.add_parser(
        "decode", aliases=["dec"], help="Decode a QOI file to another image format"
    )
    decode_parser.add_argument("input_file", help="Input QOI file")
    decode_parser.add_argument("output_file", help="Output image file")

    show_parser = subparsers.add_parser("show", help="Show the file header")
    show_parser.add_argument("input_file", help="Input QOI file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logging.getLogger("qoi_tools").setLevel(logging.DEBUG)
    else:
        logging.getLogger("qoi_tools").setLevel(logging.INFO)

    try:
        if args.command in ("encode", "enc"):
            colorspace = ColorSpace.LINEAR if args.linear else ColorSpace.SRGB
            with Image.open(args.input_file) as image:
                qoi = QOIImage.frompil(image, colorspace=colorspace)
            qoi.save(args.output_file)
            logger.info("wrote %r to %s" % (qoi, args.output_file))

        elif args.command in ("decode", "dec"):
            qoi = QOIImage.open(args.input_file)
            qoi.topil().save(args.output_file)
            logger.info("wrote %dx%d image to %s" % (qoi.width, qoi.height, args.output_file))

        elif args.command == "show":
            qoi = QOIImage.open(args.input_file)
            print(qoi.header)

    except (ValueError, OSError) as e:
        logger.error("%s: %s" % (args.input_file, e))
        return 1

    return None


if __name__ == "__main__":
    raise SystemExit(main())
