# range_io.py
# Text format: a header line "n m", then m lines "a b k".


class QueryFormatError(ValueError):
    def __init__(self, lineno, message):
        self.lineno = lineno
        super().__init__(f"line {lineno}: {message}")


def _ints(line, lineno, count, what):
    parts = line.split()
    if len(parts) != count:
        raise QueryFormatError(lineno, f"expected {count} integers for {what}, got {len(parts)}")
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise QueryFormatError(lineno, f"non-integer value in {what}: {line.strip()!r}") from None


def parse_queries(lines):
    """Parse the header and query rows, returning (n, [(a, b, k), ...])."""
    rows = [(no, ln) for no, ln in enumerate(lines, start=1) if ln.strip()]
    if not rows:
        raise QueryFormatError(1, "missing 'n m' header")

    no, header = rows[0]
    n, m = _ints(header, no, 2, "header")
    if m < 0:
        raise QueryFormatError(no, f"query count must be >= 0, got {m}")

    body = rows[1:]
    if len(body) != m:
        last = body[-1][0] if body else no
        raise QueryFormatError(last, f"header announces {m} queries, found {len(body)}")

    queries = [tuple(_ints(ln, no, 3, "query")) for no, ln in body]
    return n, queries


def read_queries(path):
    with open(path, "r", encoding="utf-8") as f:
        return parse_queries(f)


def write_result(path, value):
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{value}\n")
