# domain/encoded_word.py
# RFC 2047 encoded-words: Q encoding on the way out, Q/B decoding on the way in.
from __future__ import annotations
import logging
from email.errors import HeaderParseError
from email.header import decode_header

from domain.grammar import ENCODED_WORD_RE
from domain.headers.exceptions import InvalidArgumentException
from domain.models import EncodedWord, ErrorKind

logger = logging.getLogger(__name__)

ASCII = "ASCII"
UTF8 = "UTF-8"

MAX_ENCODED_WORD_LENGTH = 75  # RFC 2047 §2

_Q_SAFE = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!*+-/")


def detect_encoding(text: str) -> str:
    return ASCII if all(ch == "\t" or 32 <= ord(ch) <= 126 for ch in text) else UTF8


def _q_octet(octet: int) -> str:
    if octet == 0x20:
        return "_"
    if octet in _Q_SAFE:
        return chr(octet)
    return f"={octet:02X}"


def encode(text: str) -> tuple[str, str]:
    """
    Devuelve (valor, etiqueta).
    - ASCII de 7 bits → tal cual, etiqueta "ASCII".
    - Resto → uno o varios `=?UTF-8?Q?...?=` separados por un espacio (máx. 75 caracteres
      cada uno); un carácter multi-octeto nunca se parte entre dos palabras.
    Un texto ASCII que ya contiene algo con forma de encoded-word también se codifica:
    si saliera tal cual, al volver a leerlo se decodificaría.
    """
    if detect_encoding(text) == ASCII and not ENCODED_WORD_RE.search(text):
        return text, ASCII

    prefix, suffix = f"=?{UTF8}?Q?", "?="
    room = MAX_ENCODED_WORD_LENGTH - len(prefix) - len(suffix)

    chunks: list[str] = []
    chunk = ""
    for ch in text:
        piece = "".join(_q_octet(b) for b in ch.encode("utf-8"))
        if chunk and len(chunk) + len(piece) > room:
            chunks.append(chunk)
            chunk = ""
        chunk += piece
    chunks.append(chunk)
    return " ".join(f"{prefix}{c}{suffix}" for c in chunks), UTF8


def split_encoded_word(token: str) -> EncodedWord | None:
    m = ENCODED_WORD_RE.fullmatch(token)
    if not m:
        return None
    return EncodedWord(charset=m["charset"], encoding=m["encoding"].upper(), payload=m["payload"])


def decode(token: str) -> str:
    """Decodifica un único encoded-word; cualquier otro token pasa tal cual."""
    if split_encoded_word(token) is None:
        return token
    return decode_value(token)


def decode_value(value: str) -> str:
    if not ENCODED_WORD_RE.search(value):
        return value
    try:
        parts = decode_header(value)
    except HeaderParseError as exc:
        raise InvalidArgumentException("Invalid encoded word in header value", kind=ErrorKind.HEADER_VALUE) from exc

    decoded: list[str] = []
    for data, charset in parts:
        if isinstance(data, str):
            decoded.append(data)
            continue
        try:
            decoded.append(data.decode(charset or "ascii"))
        except (LookupError, UnicodeDecodeError) as exc:
            logger.debug("Encoded word rejected (charset=%s)", charset)
            raise InvalidArgumentException(
                "Invalid encoded word charset in header value", kind=ErrorKind.HEADER_VALUE
            ) from exc
    return "".join(decoded)
