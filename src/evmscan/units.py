# 1 native token (ETH/BNB/MATIC) = 10**18 wei
NATIVE_TOKEN_DECIMALS = 18


def format_scaled_int(value: int, decimals: int = NATIVE_TOKEN_DECIMALS) -> str:
    """Render an integer amount in base units as a plain decimal string."""
    if decimals <= 0:
        return str(value)
    negative = value < 0
    s = str(abs(value))
    if len(s) <= decimals:
        s = "0." + "0" * (decimals - len(s)) + s
    else:
        s = s[: len(s) - decimals] + "." + s[len(s) - decimals :]
    s = s.rstrip("0").rstrip(".") or "0"
    if negative:
        s = "-" + s
    return s
