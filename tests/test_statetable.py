from markovtext.analytics.statetable import StateTable
from markovtext.core.tokens import TokenPool

def test_lookup_or_create_and_lookup():
    t = StateTable(buckets=8)
    assert t.lookup((1, 2)) is None
    sp = t.lookup_or_create((1, 2))
    assert t.lookup_or_create((1, 2)) is sp
    assert t.lookup((1, 2)) is sp
    assert len(t) == 1
    t.append_suffix(sp, 3); t.append_suffix(sp, 3)
    assert list(sp) == [3, 3] and t.suffix_count == 2

def test_structural_equality():
    pool = TokenPool()
    t = StateTable()
    k1 = (pool.intern("The"), pool.intern("cat"))
    k2 = (pool.intern("".join(["T", "he"])), pool.intern(str("ca") + "t"))
    assert t.bucket_of(k1) == t.bucket_of(k2)
    assert t.lookup_or_create(k1) is t.lookup(k2)

def test_grows_and_keeps_states():
    t = StateTable(buckets=2)
    states = {}
    for i in range(100):
        sp = t.lookup_or_create((i, i + 1))
        t.append_suffix(sp, i)
        states[(i, i + 1)] = sp
    assert t.nbuckets > 2
    assert len(t) == 100
    for key, sp in states.items():
        assert t.lookup(key) is sp
    assert sorted(sp.prefix for sp in t) == sorted(states)

def test_collisions_in_one_bucket():
    t = StateTable(buckets=1)
    a = t.lookup_or_create((1, 2))
    b = t.lookup_or_create((2, 1))
    assert a is not b
    assert t.lookup((2, 1)) is b
