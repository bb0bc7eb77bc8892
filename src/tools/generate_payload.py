import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from config import ConfigError, load_config, validate_config
from logging_setup import configure_logging
from qris import messages
from qris.errors import QrisError
from qris.payload import PayloadAssembler, validate_shape, verify_payload
from qris.render import render_qr_image
from qris.validation import validate_amount

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a QRIS payment payload")
    parser.add_argument("--amount", type=int, required=True)
    parser.add_argument("--reference", help="Fixed transaction reference instead of the timestamp")
    parser.add_argument("--out", type=Path, help="Write the rendered QR image to this path")
    args = parser.parse_args()

    configure_logging("qris-tool")
    try:
        cfg = validate_config(load_config())
    except ConfigError as error:
        print(error, file=sys.stderr)
        return 1

    check = validate_amount(args.amount, cfg.limits)
    if not check.ok:
        print(messages.validation_error_text(check.error), file=sys.stderr)
        return 2

    if args.reference:
        assembler = PayloadAssembler(cfg.merchant, lambda: args.reference)
    else:
        assembler = PayloadAssembler(cfg.merchant)

    try:
        payload = assembler.assemble(check.amount)
        print(payload)
        print(f"shape: {validate_shape(payload)}")
        print(f"verify: {verify_payload(payload)}")
        if args.out:
            args.out.write_bytes(render_qr_image(payload, cfg.render))
            print(f"Image written to {args.out}")
    except QrisError:
        logger.exception("Failed to generate payload for amount %s", args.amount)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
