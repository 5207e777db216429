import argparse
import logging
import os
import sys
import time
from typing import Optional

import numpy as np

from aapc.compression import compress, decompress
from aapc.exceptions import DecodeError
from aapc.version import __version__

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="aapc command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    compress_parser = subparsers.add_parser("compress", help="Compress a file")
    compress_parser.add_argument("input_file", help="Input file")
    compress_parser.add_argument("output_file", help="Output file")

    decompress_parser = subparsers.add_parser("decompress", help="Decompress a file")
    decompress_parser.add_argument("input_file", help="Compressed input file")
    decompress_parser.add_argument("output_file", help="Output file")

    test_parser = subparsers.add_parser(
        "test", help="Round-trip generated data, or the given file"
    )
    test_parser.add_argument("input_file", nargs="?", help="Optional input file")
    test_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for generated data"
    )

    folder_parser = subparsers.add_parser(
        "test-folder", help="Round-trip every file in a folder"
    )
    folder_parser.add_argument(
        "folder", nargs="?", default="test_data", help="Folder with test files"
    )
    folder_parser.add_argument(
        "--log", default="test_log.txt", help="Report file to write"
    )

    return parser.parse_args(argv)


def generate_test_data(seed: Optional[int] = None, segments: int = 1024) -> bytes:
    """
    Mix of runs and noise resembling bitmap rows.

    Each segment is a run of a random byte (length 1 to 99) followed by random
    bytes (length 1 to 49).
    """
    rng = np.random.default_rng(seed)
    chunks = []
    for _ in range(segments):
        value = rng.integers(0, 256, dtype=np.uint8)
        chunks.append(np.full(rng.integers(1, 100), value, dtype=np.uint8))
        chunks.append(rng.integers(0, 256, size=rng.integers(1, 50), dtype=np.uint8))
    return np.concatenate(chunks).tobytes()


def _ratio(compressed: int, original: int) -> float:
    return compressed / original if original else 0.0


def round_trip(data: bytes) -> dict:
    """Compress and decompress ``data``, returning sizes and timings."""
    start = time.perf_counter()
    compressed = compress(data)
    compress_time = time.perf_counter() - start

    start = time.perf_counter()
    decompressed = decompress(compressed)
    decompress_time = time.perf_counter() - start

    return {
        "original_size": len(data),
        "compressed_size": len(compressed),
        "ratio": _ratio(len(compressed), len(data)),
        "compress_time": compress_time,
        "decompress_time": decompress_time,
        "identical": decompressed == data,
    }


def _speed(size: int, seconds: float) -> float:
    return size / seconds if seconds > 0 else 0.0


def _format_report(name: str, stats: dict) -> str:
    return (
        "Timestamp: {timestamp}s\n"
        "File: {name}\n"
        "Original Size: {original_size} bytes\n"
        "Compressed Size: {compressed_size} bytes\n"
        "Ratio: {ratio:.2f}\n"
        "Compress Time: {compress_time:.6f}s\n"
        "Compress Speed: {compress_speed:.2f} bytes/s\n"
        "Decompress Time: {decompress_time:.6f}s\n"
        "Decompress Speed: {decompress_speed:.2f} bytes/s\n"
        "---"
    ).format(
        timestamp=int(time.time()),
        name=name,
        compress_speed=_speed(stats["original_size"], stats["compress_time"]),
        decompress_speed=_speed(stats["original_size"], stats["decompress_time"]),
        **stats,
    )


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    level = logging.DEBUG if args.verbose else logging.INFO
    logger.setLevel(level)
    logging.getLogger("aapc").setLevel(level)

    if args.command == "compress":
        with open(args.input_file, "rb") as f:
            data = f.read()
        start = time.perf_counter()
        compressed = compress(data)
        duration = time.perf_counter() - start
        with open(args.output_file, "wb") as f:
            f.write(compressed)
        logger.info(
            "Compressed %s (%d bytes) to %s (%d bytes) in %.6fs. Ratio: %.2f",
            args.input_file,
            len(data),
            args.output_file,
            len(compressed),
            duration,
            _ratio(len(compressed), len(data)),
        )

    elif args.command == "decompress":
        with open(args.input_file, "rb") as f:
            compressed = f.read()
        start = time.perf_counter()
        try:
            data = decompress(compressed)
        except DecodeError:
            return 1
        duration = time.perf_counter() - start
        with open(args.output_file, "wb") as f:
            f.write(data)
        logger.info(
            "Decompressed %s (%d bytes) to %s (%d bytes) in %.6fs.",
            args.input_file,
            len(compressed),
            args.output_file,
            len(data),
            duration,
        )

    elif args.command == "test":
        if args.input_file:
            logger.info("Testing with file: %s", args.input_file)
            with open(args.input_file, "rb") as f:
                data = f.read()
        else:
            data = generate_test_data(args.seed)
            logger.debug("Generated test data of %d bytes", len(data))

        stats = round_trip(data)
        logger.info("Original size: %d bytes", stats["original_size"])
        logger.info(
            "Compressed size: %d bytes (ratio: %.2f)",
            stats["compressed_size"],
            stats["ratio"],
        )
        logger.info("Compression time: %.6fs", stats["compress_time"])
        logger.info("Decompression time: %.6fs", stats["decompress_time"])
        if not stats["identical"]:
            logger.error("Decompression mismatch")
            return 1
        logger.info("Data is identical.")

    elif args.command == "test-folder":
        if not os.path.isdir(args.folder):
            logger.error("%r does not exist or is not a directory", args.folder)
            return 1

        reports = []
        for name in sorted(os.listdir(args.folder)):
            path = os.path.join(args.folder, name)
            if not os.path.isfile(path):
                continue
            with open(path, "rb") as f:
                data = f.read()
            logger.debug("Processing file %s (%d bytes)", name, len(data))
            stats = round_trip(data)
            if not stats["identical"]:
                logger.error("Decompression mismatch for file: %s", name)
                return 1
            reports.append(_format_report(name, stats))
            logger.info("Tested %s successfully.", name)

        if not reports:
            logger.info("No files found in %r", args.folder)
        else:
            with open(args.log, "w") as f:
                f.write("\n\n".join(reports))
            logger.info("All tests complete. Report written to %r", args.log)

    return None


if __name__ == "__main__":
    sys.exit(main())
