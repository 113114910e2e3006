from arrowkit.functional.closures import CounterHandle, memoized_counter


def test_counter_increment_and_decrement():
    counter = memoized_counter()
    assert isinstance(counter, CounterHandle)
    assert counter.increment() == 1
    assert counter.increment() == 2
    assert counter.decrement() == 1
    assert counter.get() == 1


def test_counter_start_value():
    counter = memoized_counter(start=10)
    assert counter.get() == 10
    assert counter.decrement() == 9


def test_counters_are_independent():
    first = memoized_counter()
    second = memoized_counter()

    first.increment()
    first.increment()
    second.decrement()

    assert first.get() == 2
    assert second.get() == -1


def test_get_does_not_mutate():
    counter = memoized_counter()
    counter.increment()
    assert counter.get() == counter.get() == 1
