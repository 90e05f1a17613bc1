"""Human-readable formatting of byte counts."""

_KB = 1024
_MB = 1024 * _KB
_GB = 1024 * _MB
_TB = 1024 * _GB

_UNITS = ((_MB, _KB, "KB"), (_GB, _MB, "MB"), (_TB, _GB, "GB"))


def format_size(size: int) -> str:
    """Format a byte count with binary units and two decimals above one KB."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size < _KB:
        return f"{size} B"
    for limit, unit, name in _UNITS:
        if size < limit:
            return f"{size / unit:.2f} {name}"
    return f"{size / _TB:.2f} TB"