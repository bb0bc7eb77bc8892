#!/usr/bin/env python3
"""
Smoke test: chat text -> QRIS reply through the aiogram handler.

Validates:
- `bayar 50000` answers with a PNG photo whose payload passes the full CRC check.
- `bayar 500` answers with the minimum-amount correction, no photo.
- `bayar lima ribu` answers with the usage guide.
- plain chat and group messages get no answer at all.

Run:
  python3 scripts/smoke_payment_command_flow.py
"""

from __future__ import annotations

import asyncio
import sys
import types
from pathlib import Path


def _resolve_repo_root() -> Path:
    candidates: list[Path] = []
    try:
        candidates.append(Path(__file__).resolve().parents[1])
    except Exception:
        pass
    candidates.extend([Path.cwd(), Path("/app"), Path("/workspace")])
    for root in candidates:
        if (root / "src" / "qris").is_dir():
            return root
    raise FileNotFoundError("Cannot locate repo root with src/qris/")


REPO_ROOT = _resolve_repo_root()


def _assert(cond: bool, msg: str) -> None:
    if not cond:
        raise AssertionError(msg)


class _FakeMessage:
    def __init__(self, text: str, chat_type: str = "private") -> None:
        self.text = text
        self.chat = types.SimpleNamespace(id=700001, type=chat_type)
        self.answers: list[str] = []
        self.photos: list[tuple[object, str | None]] = []

    async def answer(self, text: str, **_kwargs) -> None:
        self.answers.append(text)

    async def answer_photo(self, photo, caption: str | None = None, **_kwargs) -> None:
        self.photos.append((photo, caption))


async def _run_checks() -> None:
    sys.path.insert(0, str(REPO_ROOT / "src"))

    from config import load_config, validate_config  # noqa: WPS433
    from handlers import handle_payment_message  # noqa: WPS433
    from qris.payload import verify_payload  # noqa: WPS433
    from qris.service import PaymentQrService  # noqa: WPS433

    cfg = validate_config(load_config())
    payloads: list[str] = []

    def _recording_renderer(payload: str, options) -> bytes:
        from qris.render import render_qr_image  # noqa: WPS433

        payloads.append(payload)
        return render_qr_image(payload, options)

    service = PaymentQrService(cfg, renderer=_recording_renderer)

    ok = _FakeMessage("bayar 50000")
    await handle_payment_message(ok, payment_service=service)
    _assert(len(ok.photos) == 1, f"expected one photo, got answers={ok.answers}")
    photo, caption = ok.photos[0]
    _assert(bytes(photo.data).startswith(b"\x89PNG"), "photo must be PNG bytes")
    _assert("Rp 50.000" in (caption or ""), f"caption must show amount: {caption!r}")
    _assert(len(payloads) == 1 and verify_payload(payloads[0]).ok, f"payload failed CRC check: {payloads}")

    low = _FakeMessage("bayar 500")
    await handle_payment_message(low, payment_service=service)
    _assert(not low.photos, "below-minimum amount must not produce a photo")
    _assert(low.answers and "minimal" in low.answers[0], f"unexpected answer: {low.answers}")

    malformed = _FakeMessage("bayar lima ribu")
    await handle_payment_message(malformed, payment_service=service)
    _assert(malformed.answers and "[jumlah]" in malformed.answers[0], f"expected help: {malformed.answers}")

    for message in (_FakeMessage("halo"), _FakeMessage("bayar 50000", chat_type="group")):
        await handle_payment_message(message, payment_service=service)
        _assert(not message.answers and not message.photos, f"expected silence for {message.text!r}")


def main() -> None:
    asyncio.run(_run_checks())
    print("OK: payment command flow smoke passed.")


if __name__ == "__main__":
    main()
