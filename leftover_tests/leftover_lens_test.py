import suite
from dgen import from_schema
from leftover import (
    Cursor, P, naturals, evaluate, splits_at, spans, breaks, identity, bounded, groups
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
raises = suite.raises


def draw(cursor):
    return cursor.draw()


def draw_all(cursor):
    return cursor.draw_all()


def split_example(cursor):
    x = cursor.zoom(splits_at(3), draw)
    y = cursor.zoom(splits_at(3), draw_all)
    return x, y


def span_example(cursor):
    x = cursor.zoom(spans(lambda n: n >= 4), draw)
    y = cursor.zoom(spans(lambda n: n < 4), draw_all)
    z = cursor.zoom(spans(lambda n: n >= 4), draw)
    return x, y, z


# --- read-only traversal ---

@test("the bounded prefix followed by the continuation is the whole stream")
def test_boundary_conservation():
    prefix, continuation = bounded(splits_at(3), P([1, 2, 3, 4, 5, 6]))
    assert_equal(prefix.to.list(), [1, 2, 3], "bounded prefix")
    assert_equal(continuation.to.list(), [4, 5, 6], "continuation")

    data = [1, 2, 3, 4, 5, 6]
    for n in range(0, 9):
        prefix, continuation = bounded(splits_at(n), P(data, result='r'))
        assert_equal(prefix.to.list() + continuation.to.list(), data, f"conservation for n={n}")
        assert_equal(continuation.to.result(), 'r', f"final result for n={n}")


@test("the continuation starts where the prefix ends however much of the prefix was drawn")
def test_continuation_laziness():
    prefix, continuation = bounded(splits_at(3), naturals())
    prefix.step()
    assert_equal(continuation.split.at(2).to.list(), [3, 4], "after drawing one element")

    prefix, continuation = bounded(spans(lambda n: n < 5), naturals(1))
    assert_equal(continuation.split.at(2).to.list(), [5, 6], "before drawing anything")
    assert_equal(prefix.to.list(), [1, 2, 3, 4], "the prefix is still intact")


@test("the split accessor hands out the prefix with the rest as its final result")
def test_split_accessor():
    printed = []
    rest = P([1, 2, 3, 4, 5, 6]).split.at(3).to.for_each(printed.append)
    assert_equal(printed, [1, 2, 3], "outer producer")
    assert_equal(rest.to.list(), [4, 5, 6], "inner producer")
    prefix, continuation = P([1, 2, 3]).split.bounded(spans(lambda n: n < 2))
    assert_equal((prefix.to.list(), continuation.to.list()), ([1], [2, 3]), "accessor bounded")


@test("a count beyond the input takes everything and leaves only the final result")
def test_count_beyond_input():
    prefix, continuation = bounded(splits_at(10), P([1, 2], result='r'))
    assert_equal(prefix.to.list(), [1, 2], "everything is taken")
    assert_equal(continuation.to.list_and_result(), ([], 'r'), "continuation is exhausted")


@test("counts of zero or less give an empty prefix")
def test_non_positive_counts():
    for n in (0, -2):
        prefix, continuation = bounded(splits_at(n), P([1, 2]))
        assert_equal(prefix.to.list(), [], f"empty prefix for n={n}")
        assert_equal(continuation.to.list(), [1, 2], f"untouched continuation for n={n}")


@test("a predicate rejecting the first element gives an empty prefix and the original stream")
def test_span_rejects_first():
    source = P([5, 1])
    prefix, continuation = bounded(spans(lambda n: n < 3), source)
    assert_equal(prefix.to.list(), [], "empty prefix")
    assert_equal(continuation.to.list(), [5, 1], "nothing consumed")
    assert_that(prefix.step().result is source, "the prefix ends on the original node")


# --- zoom ---

@test("zoom splices unread elements of the bound in front of the rest")
def test_zoom_splice():
    cursor = Cursor(naturals(1))
    assert_equal(cursor.zoom(splits_at(3), draw), 1, "one element drawn inside the bound")
    assert_equal([cursor.draw() for _ in range(4)], [2, 3, 4, 5], "2 and 3 were spliced back")


@test("zoom keeps extra pushback done inside the bound")
def test_zoom_extra_pushback():
    def overreach(cursor):
        first = cursor.draw()
        cursor.un_draw(first)
        cursor.un_draw(0)
        return first

    cursor = Cursor(P([1, 2, 3, 4]))
    assert_equal(cursor.zoom(splits_at(2), overreach), 1, "inner result")
    assert_equal(cursor.draw_all(), [0, 1, 2, 3, 4], "pushed back elements come first")


@test("consecutive zooms share the outer cursor")
def test_split_example():
    assert_equal(evaluate(split_example, naturals(1)), (1, [2, 3, 4]), "split example")


@test("span zooms compose sequentially")
def test_span_example():
    assert_equal(evaluate(span_example, naturals(1)), (None, [1, 2, 3], 4), "span example")


@test("nested zooms stay inside the outer bound")
def test_nested_zoom():
    nested = evaluate(lambda cursor: cursor.zoom(splits_at(2), span_example), naturals(1))
    assert_equal(nested, (None, [1, 2], None), "nest example")


@test("zooming through composed lenses equals nested zooms")
def test_composition_law():
    below_three = spans(lambda n: n < 3)
    composed = splits_at(5).compose(below_three)
    for parser in (draw, draw_all):
        left = Cursor(naturals(1))
        right = Cursor(naturals(1))
        a = left.zoom(composed, parser)
        b = right.zoom(splits_at(5), lambda inner: inner.zoom(below_three, parser))
        assert_equal(a, b, "same result")
        assert_equal([left.draw() for _ in range(5)], [right.draw() for _ in range(5)], "same leftovers")


@test("zooming through the identity lens is the same as running directly")
def test_identity_law():
    cursor = Cursor(P([1, 2, 3]))
    assert_equal(cursor.zoom(identity(), lambda c: (c.draw(), c.draw())), (1, 2), "inner result")
    assert_equal(cursor.draw_all(), [3], "outer cursor continues")


@test("breaks stops at the first element satisfying the predicate")
def test_breaks():
    cursor = Cursor(P('ab,c'))
    assert_equal(cursor.zoom(breaks(lambda ch: ch == ','), draw_all), ['a', 'b'], "up to the comma")
    assert_equal(cursor.draw_all(), [',', 'c'], "the comma is not consumed")


@test("over a boundary lens transforms only the prefix")
def test_over_prefix():
    tens = P([1, 2, 3, 4]).over(splits_at(2), lambda prefix: prefix.select(lambda n: n * 10))
    assert_equal(tens.to.list(), [10, 20, 3, 4], "prefix transformed, rest untouched")


@test("bounded and zoom reject lenses that do not focus on a producer")
def test_non_producer_lens():
    with raises(TypeError, "bounded with a grouping lens"):
        bounded(groups(), P([1]))
    with raises(TypeError, "zoom with a grouping lens"):
        Cursor(P([1])).zoom(groups(), draw)


@test("zoom over generated words conserves the stream")
def test_zoom_generated():
    data = from_schema('word', seed=21).take(12).to.list()
    cursor = Cursor(P(data))
    head = cursor.zoom(splits_at(5), draw_all)
    assert_equal(len(head), 5, "bounded to five words")
    assert_equal(head + cursor.draw_all(), data, "nothing lost")


@test("zoom bounds an endless generated stream")
def test_zoom_endless():
    cursor = Cursor(from_schema('word', seed=8).forever())
    words = cursor.zoom(splits_at(3), draw_all)
    assert_equal(len(words), 3, "three words inside the bound")
    assert_that(isinstance(cursor.peek(), str), "the stream carries on")


if __name__ == "__main__":
    suite.run(title="leftover boundary view test suite")
