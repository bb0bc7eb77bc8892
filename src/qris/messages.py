"""User-facing texts for the payment bot (HTML parse mode)."""

from __future__ import annotations

import html
from numbers import Real

from .errors import AmountError, AmountErrorKind
from .models import AmountLimits, MerchantProfile

PROCESSING_ERROR = "Terjadi kesalahan dalam memproses pesan Anda."
QR_GENERATION_ERROR = "Maaf, terjadi kesalahan saat membuat QR code pembayaran. Silakan coba lagi."
VALIDATION_ERROR = "❌ Terjadi kesalahan dalam validasi jumlah pembayaran. Silakan coba lagi."


def format_rupiah(amount: object) -> str:
    """Format an amount with ``id-ID`` grouping, e.g. ``Rp 1.500.000``."""
    if isinstance(amount, bool) or not isinstance(amount, Real):
        return "Rp 0"
    try:
        return "Rp " + f"{int(amount):,}".replace(",", ".")
    except (OverflowError, ValueError):
        return "Rp 0"


def validation_error_text(error: AmountError) -> str:
    if error.kind is AmountErrorKind.NOT_A_NUMBER:
        return "❌ Jumlah pembayaran harus berupa angka.\n\nContoh: bayar 50000"
    if error.kind is AmountErrorKind.NOT_INTEGER:
        return "❌ Jumlah pembayaran harus berupa bilangan bulat.\n\nContoh: bayar 75000"
    if error.kind is AmountErrorKind.BELOW_MINIMUM:
        return (
            f"❌ Jumlah pembayaran minimal adalah {format_rupiah(error.bound)}.\n\n"
            f"Contoh: bayar {error.bound}"
        )
    if error.kind is AmountErrorKind.ABOVE_MAXIMUM:
        return (
            f"❌ Jumlah pembayaran maksimal adalah {format_rupiah(error.bound)}.\n\n"
            f"Contoh: bayar {error.bound}"
        )
    return VALIDATION_ERROR


def help_text(limits: AmountLimits, keyword: str = "bayar") -> str:
    return (
        "🤖 <b>QRIS Payment Bot</b>\n\n"
        "Untuk melakukan pembayaran, gunakan format:\n"
        f"<b>{keyword} [jumlah]</b>\n\n"
        "Contoh:\n"
        f"• {keyword} 50000\n"
        f"• {keyword} 150000\n"
        f"• {keyword} 1000000\n\n"
        "📝 <b>Ketentuan:</b>\n"
        f"• Jumlah minimal: {format_rupiah(limits.min_amount)}\n"
        f"• Jumlah maksimal: {format_rupiah(limits.max_amount)}\n"
        "• Hanya angka, tanpa titik atau koma\n\n"
        "💡 Bot akan mengirimkan QR code QRIS untuk pembayaran"
    )


def payment_caption(amount: Real, merchant: MerchantProfile | None = None) -> str:
    """Caption sent together with the QR image.

    Merchant name and city are included only when ``merchant`` is given.
    """
    text = (
        "💳 <b>QRIS Pembayaran</b>\n\n"
        f"💰 Jumlah: {format_rupiah(amount)}\n"
        "📱 Scan QR code di bawah ini untuk melakukan pembayaran\n\n"
    )
    if merchant is not None:
        text += f"🏪 Merchant: {html.escape(merchant.name)}\n📍 Lokasi: {html.escape(merchant.city)}\n\n"
    text += "⚠️ <b>Catatan:</b> QR code ini adalah contoh untuk demonstrasi"
    return text


def error_text(message: str, keyword: str = "bayar") -> str:
    return f"❌ <b>Error</b>\n\n{message}\n\nKetik \"{keyword}\" untuk melihat panduan penggunaan."
