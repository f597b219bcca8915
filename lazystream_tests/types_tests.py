import suite
from lazystream import Pair, Result

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


# pair tests

@test("pair holds both values")
def test_pair_values():
    one, two = object(), object()
    pair = Pair.of(one, two)
    assert_that(pair.one is one and pair.two is two, "slots should pass through unchanged")


@test("pair unpacks like a tuple")
def test_pair_unpacks():
    value, state = Pair(1, 2)
    assert_that((value, state) == (1, 2), "should unpack in order")


@test("pair rejects None in either slot")
def test_pair_rejects_none():
    assert_raises(ValueError, lambda: Pair(None, 1))
    assert_raises(ValueError, lambda: Pair(1, None))


@test("pair is immutable")
def test_pair_is_immutable():
    pair = Pair(1, 2)
    assert_raises(TypeError, lambda: setattr(pair, '_one', 3))


# result tests

@test("continue_with is not terminal")
def test_continue_with():
    result = Result.continue_with("value")
    assert_that(result.value == "value", "should carry the value")
    assert_that(not result.terminal, "should not be terminal")


@test("stop_with is terminal")
def test_stop_with():
    result = Result.stop_with(0)
    assert_that(result.value == 0, "falsy values are allowed")
    assert_that(result.terminal, "should be terminal")


@test("result rejects None")
def test_result_rejects_none():
    assert_raises(ValueError, lambda: Result.continue_with(None))
    assert_raises(ValueError, lambda: Result.stop_with(None))


@test("result.of is terminal only for true")
def test_result_of_flag():
    assert_that(Result.of(True).terminal and Result.of(True).value is True, "true should stop")
    assert_that(not Result.of(False).terminal and Result.of(False).value is False, "false should continue")


@test("result is immutable")
def test_result_is_immutable():
    result = Result.continue_with(1)
    assert_raises(TypeError, lambda: setattr(result, '_terminal', True))


if __name__ == "__main__":
    suite.run(title="lazystream types test suite")
