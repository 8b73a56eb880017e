"""
Decimal conversion utilities for token amounts and prices.

The CLOB contract stores every amount and price at a fixed 18-decimal
"universal" precision. These helpers mirror the contract's
_convertToUniversal / _convertFromUniversal logic so amounts computed
off-chain match what the contract sees.
"""

from decimal import Decimal, InvalidOperation, localcontext

# Universal decimal standard used by the Monaco CLOB
UNIVERSAL_DECIMALS = 18

# Plain fixed-point notation only: no exponent, sign prefix, separators or whitespace
_PLAIN_NUMBER_CHARS = frozenset('0123456789.-')


def _truncating_div(value: int, divisor: int) -> int:
    # Python's // floors; the contract truncates toward zero.
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _scale_up(value: int, from_decimals: int) -> int:
    """Rescale a value held at from_decimals to UNIVERSAL_DECIMALS."""
    if from_decimals == UNIVERSAL_DECIMALS:
        return value

    if from_decimals < UNIVERSAL_DECIMALS:
        return value * 10 ** (UNIVERSAL_DECIMALS - from_decimals)
    return _truncating_div(value, 10 ** (from_decimals - UNIVERSAL_DECIMALS))


def _scale_down(value: int, to_decimals: int) -> int:
    """Rescale a value held at UNIVERSAL_DECIMALS to to_decimals."""
    if to_decimals == UNIVERSAL_DECIMALS:
        return value

    if to_decimals < UNIVERSAL_DECIMALS:
        return _truncating_div(value, 10 ** (UNIVERSAL_DECIMALS - to_decimals))
    return value * 10 ** (to_decimals - UNIVERSAL_DECIMALS)


def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise ValueError(f"Decimals must not be negative, got {decimals}")


def to_universal_amount(amount: int, native_decimals: int) -> int:
    """
    Convert amount from native decimals to universal 18-decimal format.

    Tokens with more than 18 decimals lose the digits below the universal
    precision (truncated toward zero), exactly as the contract does.

    Args:
        amount: Amount in the token's smallest unit
        native_decimals: Number of decimals for the token

    Returns:
        Amount at universal precision
    """
    return _scale_up(amount, native_decimals)


def from_universal_amount(universal_amount: int, native_decimals: int) -> int:
    """
    Convert amount from universal 18-decimal format back to native decimals.

    Args:
        universal_amount: Amount at universal precision
        native_decimals: Number of decimals for the token

    Returns:
        Amount in the token's smallest unit
    """
    return _scale_down(universal_amount, native_decimals)


def to_universal_price(native_price: int, base_decimals: int, quote_decimals: int) -> int:
    """
    Convert price from native format to universal 18-decimal format.

    Price represents units of quote per 1 unit of base, so only the quote
    token's precision is normalized. base_decimals is accepted to match the
    contract's signature and does not affect the result.

    Args:
        native_price: Price at the quote token's precision
        base_decimals: Number of decimals for the base token (unused)
        quote_decimals: Number of decimals for the quote token

    Returns:
        Price at universal precision
    """
    return _scale_up(native_price, quote_decimals)


def from_universal_price(universal_price: int, base_decimals: int, quote_decimals: int) -> int:
    """Convert price from universal format back to the quote token's precision."""
    return _scale_down(universal_price, quote_decimals)


def parse_native_amount(amount: str, decimals: int) -> int:
    """
    Convert a human-readable decimal string to the token's smallest unit.

    Accepts an optional leading minus sign, digits and an optional fraction
    ("1", "1.5", ".5", "1."). Fraction digits beyond `decimals` are only
    allowed when they are all zero.

    Args:
        amount: Amount in human-readable units, e.g. "1.5"
        decimals: Number of decimals for the token

    Returns:
        Amount in smallest unit

    Raises:
        ValueError: If the string is malformed or has too many decimals
    """
    _check_decimals(decimals)
    if not amount or not set(amount) <= _PLAIN_NUMBER_CHARS:
        raise ValueError(f"Invalid decimal string: {amount!r}")
    try:
        value = Decimal(amount)
    except InvalidOperation:
        raise ValueError(f"Invalid decimal string: {amount!r}") from None

    # scaleb rounds to the context precision, so make room for every digit
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount))
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(f"Too many decimals for {decimals}-decimal token: {amount!r}")
    return int(scaled)


def format_native_amount(amount: int, decimals: int) -> str:
    """
    Convert amount from token's smallest unit to a human-readable string.

    Trailing zeros of the fraction are dropped, keeping at least one digit
    ("1.0", "1.5"). With zero decimals the plain integer is returned.

    Args:
        amount: Amount in smallest unit
        decimals: Number of decimals for the token

    Returns:
        Amount as a decimal string
    """
    _check_decimals(decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(amount)))
        value = Decimal(amount).scaleb(-decimals)

    text = format(value, 'f')
    if '.' in text:
        text = text.rstrip('0')
        if text.endswith('.'):
            text += '0'
    return text


def parse_to_universal_amount(amount: str, native_decimals: int) -> int:
    """Convert a human-readable amount directly to universal format."""
    native_amount = parse_native_amount(amount, native_decimals)
    return to_universal_amount(native_amount, native_decimals)


def format_universal_amount(universal_amount: int, native_decimals: int) -> str:
    """Convert a universal amount directly to a human-readable string."""
    native_amount = from_universal_amount(universal_amount, native_decimals)
    return format_native_amount(native_amount, native_decimals)
