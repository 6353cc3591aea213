from generators import from_, constant, ones, fibs, from_via_cons, constant_via_cons, fibs_via_cons


def test_from():
    assert from_(5).take(3).to_list() == [5, 6, 7]


def test_constant():
    assert constant('a').take(4).to_list() == ['a'] * 4
    assert ones().take(3).to_list() == [1, 1, 1]


def test_fibs():
    assert fibs().take(7).to_list() == [0, 1, 1, 2, 3, 5, 8]


def test_unfold_and_cons_definitions_agree():
    assert from_(-3).take(10).to_list() == from_via_cons(-3).take(10).to_list()
    assert constant(7).take(10).to_list() == constant_via_cons(7).take(10).to_list()
    assert fibs().take(30).to_list() == fibs_via_cons().take(30).to_list()


def test_constant_via_cons_is_a_single_node():
    s = constant_via_cons('x')
    assert s.tail is s
    assert s.drop(1000) is s


def test_generators_are_infinite_but_lazy():
    assert from_(0).drop(10000).head == 10000
    assert fibs().find(lambda n: n > 1000).get() == 1597
    assert ones().exists(lambda n: n == 1)
