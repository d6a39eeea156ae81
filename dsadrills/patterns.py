"""Text patterns drawn with stars and numbers, returned as lists of lines."""


def butterfly(n: int) -> list[str]:
    """Return the ``2n - 1`` lines of a star butterfly of half-height ``n``."""
    widths = [*range(1, n + 1), *range(n - 1, 0, -1)]
    return ["*" * i + " " * (2 * n - 2 * i) + "*" * i for i in widths]


def hollow_rectangle(rows: int, cols: int) -> list[str]:
    """Return a ``rows`` by ``cols`` rectangle with a star border and a blank inside."""
    lines = []
    for row in range(1, rows + 1):
        if row in (1, rows):
            lines.append("*" * cols)
        else:
            lines.append("".join("*" if col in (1, cols) else " " for col in range(1, cols + 1)))
    return lines


def palindrome_pyramid(n: int) -> list[str]:
    """Return a right-aligned pyramid whose row ``i`` reads ``i .. 1 .. i``.

    Each number is followed by one space and each level of indent is two
    spaces wide.
    """
    lines = []
    for i in range(1, n + 1):
        numbers = [*range(i, 0, -1), *range(2, i + 1)]
        lines.append("  " * (n - i) + "".join(f"{k} " for k in numbers))
    return lines