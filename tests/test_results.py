import pytest

from lrucaches.results import (
    CacheError,
    Evicted,
    EvictedAndUpdate,
    InvalidGhostRatioError,
    InvalidRecentRatioError,
    InvalidSizeError,
    Put,
    Update,
)


def test_invalid_size_error_carries_value_and_compares_equal():
    err = InvalidSizeError(0)
    assert err.value == 0
    assert err == InvalidSizeError(0)


def test_errors_of_different_kinds_are_not_equal():
    assert InvalidGhostRatioError(3.0) != InvalidRecentRatioError(3.0)
    assert InvalidGhostRatioError(3.0) == InvalidGhostRatioError(3.0)


def test_errors_with_different_values_are_not_equal():
    assert not (InvalidSizeError(0) == InvalidSizeError(2))


@pytest.mark.parametrize(
    "cls", [InvalidSizeError, InvalidRecentRatioError, InvalidGhostRatioError]
)
def test_error_kinds_are_cache_errors_and_value_errors(cls):
    err = cls(3.0)
    assert err.value == 3.0
    assert "3.0" in str(err)
    assert issubclass(cls, CacheError)
    assert issubclass(cls, ValueError)


def test_error_message_mentions_value():
    assert "3.0" in str(InvalidGhostRatioError(3.0))
    assert "ghost ratio" in str(InvalidGhostRatioError(3.0))


def test_error_hash_consistent_with_equality():
    assert len({InvalidSizeError(0), InvalidSizeError(0)}) == 1


def test_error_repr_names_kind():
    assert repr(InvalidRecentRatioError(3.0)) == "InvalidRecentRatioError(3.0)"


def test_put_instances_are_equal():
    assert Put() == Put()
    assert Put() != Update(1)


def test_update_holds_replaced_value():
    result = Update(11)
    assert result.value == 11
    assert result == Update(11)
    assert result != Update(4)


def test_evicted_fields_and_equality():
    result = Evicted(key=2, value=2)
    assert (result.key, result.value) == (2, 2)
    assert result == Evicted(2, 2)
    assert result != Evicted(3, 3)


def test_evicted_and_update_fields():
    result = EvictedAndUpdate(evicted=(5, 5), update=6)
    assert result.evicted == (5, 5)
    assert result.update == 6
    assert result == EvictedAndUpdate((5, 5), 6)


def test_results_are_immutable():
    result = Update(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]
    assert result.value == 1
    assert result == Update(1)


def test_results_match_structurally():
    def describe(result):
        match result:
            case Put():
                return "put"
            case Update(value=v):
                return ("update", v)
            case Evicted(key=k, value=v):
                return ("evicted", k, v)
            case EvictedAndUpdate(evicted=e, update=u):
                return ("both", e, u)

    assert describe(Put()) == "put"
    assert describe(Update(7)) == ("update", 7)
    assert describe(Evicted(2, 2)) == ("evicted", 2, 2)
    assert describe(EvictedAndUpdate((5, 5), 6)) == ("both", (5, 5), 6)