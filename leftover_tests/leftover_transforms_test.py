import itertools
import suite
from dgen import from_schema
from leftover import P, from_iterable, naturals, groups, chunks_of, Segments

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

# test data schemas
letter_schema = {'_qen_provider': 'choice', 'from': ['a', 'b']}


def counting(values, pulls):
    for value in values:
        pulls.append(value)
        yield value


# --- transformations ---

@test("drops then takes selects a window of groups")
def test_drops_takes():
    segments = P([1, 1, 2, 2, 3, 3, 4]).group.equal()
    assert_equal(segments.drops(1).takes(2).concats().to.list(), [2, 2, 3, 3], "middle groups")


@test("takes keeps the untaken groups as its final result")
def test_takes_keeps_rest():
    taken, rest = P([1, 1, 2, 3, 3], result='r').group.equal().takes(1).concats().to.list_and_result()
    assert_equal(taken, [1, 1], "taken groups")
    assert_that(isinstance(rest, Segments), "the rest is a segment sequence")
    assert_equal(rest.concats().to.list_and_result(), ([2, 3, 3], 'r'), "nothing lost")


@test("takes_discarding stops pulling after the last taken group")
def test_takes_discarding():
    pulls = []
    segments = from_iterable(counting([1, 1, 2, 2, 3], pulls)).group.equal()
    assert_equal(segments.takes_discarding(1).concats().to.list_and_result(), ([1, 1], None), "taken group")
    assert_equal(pulls, [1, 1, 2], "only the boundary element past the group is pulled")


@test("takes_draining keeps the final result of the source")
def test_takes_draining():
    segments = P([1, 1, 2, 3], result='r').group.equal()
    assert_equal(segments.takes_draining(1).concats().to.list_and_result(), ([1, 1], 'r'), "drained")
    assert_equal(segments.takes_draining(0).to.lists(), [], "no groups")


@test("taking or dropping more groups than exist")
def test_counts_beyond_sequence():
    segments = P([1, 2], result='r').group.equal()
    assert_equal(segments.takes(5).to.lists(), [[1], [2]], "takes everything")
    assert_equal(segments.drops(5).to.lists(), [], "drops everything")
    assert_equal(segments.drops(5).to.result(), 'r', "the final result survives")
    assert_equal(segments.takes(0).to.lists(), [], "takes nothing")
    assert_equal(segments.drops(0).to.lists(), [[1], [2]], "drops nothing")


@test("group indices are kept through transformations")
def test_indices_preserved():
    assert_equal(P([1, 2, 3]).group.equal().drops(1).to.lengths(), [(1, 1), (2, 1)], "original indices")
    indices = [group.index for group in P('aabbc').group.equal().drops(1)]
    assert_equal(indices, [1, 2], "iteration sees the same indices")


@test("maps transforms every group and keeps the boundaries")
def test_maps():
    segments = P('aab').group.equal()
    assert_equal(segments.maps(lambda g: g.select(str.upper)).to.lists(), [['A', 'A'], ['B']], "upper")
    assert_equal(''.join(segments.maps(lambda g: g.append('|')).concats().to.list()), 'aa|b|', "terminated")


# --- joiners ---

@test("folds reduces each group to one value")
def test_folds():
    segments = P([1, 1, 2, 3, 3, 3], result='r').group.equal()
    assert_equal(segments.folds(lambda acc, x: acc + x, 0).to.list_and_result(), ([2, 2, 9], 'r'), "sums")
    assert_equal(segments.folds(lambda acc, x: acc + [x], [], done=len).to.list(), [2, 1, 3], "with done")


@test("intercalates puts a separator between groups")
def test_intercalates():
    segments = P('aabcc').group.equal()
    assert_equal(''.join(segments.intercalates(P('-')).to.list()), 'aa-b-cc', "separated")
    assert_equal(P('').group.equal().intercalates(P('-')).to.list(), [], "no groups, no separators")


@test("concats passes over empty groups")
def test_concats_empty_groups():
    assert_equal(P(',,a,').group.splits(',').concats().to.list(), ['a'], "empty groups contribute nothing")


@test("over a grouping lens equals the hand-built pipeline")
def test_over_groups():
    def tens(segments):
        return segments.drops(1).maps(lambda g: g.select(lambda n: n * 10))

    by_lens = P([1, 1, 2, 2, 3]).over(groups(), tens).to.list()
    by_hand = tens(P([1, 1, 2, 2, 3]).group.equal()).concats().to.list()
    assert_equal(by_lens, [20, 20, 30], "transformed through the lens")
    assert_equal(by_lens, by_hand, "same as by hand")
    assert_equal(P(range(7)).over(chunks_of(3), lambda s: s.takes(1)).to.list(), [0, 1, 2], "chunk lens")


# --- infinite input ---

@test("segment pipelines terminate on infinite input")
def test_infinite_pipeline():
    result = naturals().select(lambda n: n // 3).group.equal().drops(2).concats().split.at(4).to.list()
    assert_equal(result, [2, 2, 2, 3], "third group onwards")


@test("segment pipelines pull no further than they emit")
def test_pull_count():
    pulls = []
    pipeline = from_iterable(counting(itertools.count(), pulls)).group.chunks(2).drops(1).concats()
    assert_equal(pipeline.split.at(3).to.list(), [2, 3, 4], "three elements after the first chunk")
    assert_equal(pulls, [0, 1, 2, 3, 4], "pulled exactly what was needed")


@test("generated letters regroup consistently after transforms")
def test_generated_letters():
    data = from_schema(letter_schema, seed=13).take(40).to.list()
    lengths = P(data).group.equal().to.lengths()
    kept = P(data).group.equal().drops(2).to.lengths()
    assert_equal(kept, lengths[2:], "drops keeps the remaining groups as they were")
    assert_equal(sum(n for _, n in lengths), len(data), "group lengths add up to the stream")


@test("generated records group by key and fold per group")
def test_generated_records():
    record_schema = {
        'key': {'_qen_provider': 'choice', 'from': ['x', 'y']},
        'tag': {'_qen_provider': 'ref', 'key': 'key'},
        'weight': {'_qen_provider': 'literal', 'value': 1},
    }
    records = from_schema(record_schema, seed=17).take(25).to.list()
    same_key = lambda a, b: a['key'] == b['key']
    weights = P(records).group.by(same_key).folds(lambda acc, r: acc + r['weight'], 0).to.list()
    lengths = P(records).group.by(same_key).to.lengths()
    assert_equal(weights, [n for _, n in lengths], "folded weights count the records of each run")
    assert_that(all(r['tag'] == r['key'] for r in records), "references resolve to earlier fields")


if __name__ == "__main__":
    suite.run(title="leftover transforms test suite")
