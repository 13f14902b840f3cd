import pytest

from range_io import QueryFormatError, parse_queries, read_queries, write_result


def test_parse():
    n, qs = parse_queries(["5 3\n", "1 2 100\n", "2 5 100\n", "\n", "3 4 100\n"])
    assert n == 5
    assert qs == [(1, 2, 100), (2, 5, 100), (3, 4, 100)]


def test_parse_no_queries():
    assert parse_queries(["4 0"]) == (4, [])


@pytest.mark.parametrize("lines, lineno", [
    ([], 1),
    (["5"], 1),
    (["5 x"], 1),
    (["5 2", "1 2 3"], 2),
    (["5 1", "1 2"], 2),
    (["5 1", "", "1 2 z"], 3),
    (["5 1", "1 2 3", "1 1 1"], 3),
])
def test_parse_errors(lines, lineno):
    with pytest.raises(QueryFormatError) as exc:
        parse_queries(lines)
    assert exc.value.lineno == lineno


def test_read_and_write(tmp_path):
    src = tmp_path / "in.txt"
    src.write_text("10 3\n1 5 3\n4 8 7\n6 9 1\n", encoding="utf-8")
    assert read_queries(src) == (10, [(1, 5, 3), (4, 8, 7), (6, 9, 1)])

    out = tmp_path / "out.txt"
    write_result(out, 200)
    assert out.read_text(encoding="utf-8") == "200\n"
