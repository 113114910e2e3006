"""Command-line runner that prints every functional example.

Each example is evaluated into an :class:`Example` record first and printed
afterwards, so the printed table is just a view over plain return values.
"""

import asyncio
import typing as tp

from rich.console import Console
from rich.table import Table
from rich.text import Text

from arrowkit.app.config import Settings
from arrowkit.core.exceptions import ArrowkitError
from arrowkit.core.models import Address, Employee, Item, Profile, Student, create_user
from arrowkit.functional import (
    add,
    add_three,
    check_even,
    compose,
    divide,
    factorial,
    filter_map,
    find_first,
    find_max,
    frequency_count,
    is_positive,
    map_filter_reduce_chain,
    matrix_sum,
    memoized_counter,
    multiplier,
    multiply,
    operate,
    pipeline,
    power,
    sort_by_field,
    square,
    subtract,
    sum_all,
    sum_array,
    unique,
)
from arrowkit.functional.scheduling import resolve_after, schedule_once
from arrowkit.functional.text import (
    count_vowels,
    display_user,
    get_city,
    greet,
    reverse,
    to_upper,
)
from arrowkit.logger.logger import logger, setup_logger

__all__ = ["Example", "collect_examples", "render", "main"]


class Example(tp.NamedTuple):
    section: str
    label: str
    value: tp.Any


def _basics() -> tp.List[Example]:
    section = "Basics"
    return [
        Example(section, "Square of 5", square(5)),
        Example(section, "Add(3, 7)", add(3, 7)),
        Example(section, "User", create_user("Ali", 22)),
        Example(section, "Greeting", greet("Anjum")),
        Example(section, "Default greeting", greet()),
        Example(section, "Power(3, 4)", power(3, 4)),
        Example(section, "Power(5)", power(5)),
        Example(section, "5 is", check_even(5)),
        Example(section, "Sum(1, 2, 3)", sum_all(1, 2, 3)),
        Example(section, "Double(10)", multiplier(2)(10)),
    ]


def _sequences() -> tp.List[Example]:
    section = "Sequences"
    numbers = [1, 2, 3, 4, 5]
    items = [
        Item(name="Book", price=100),
        Item(name="Pen", price=20),
        Item(name="Bag", price=300),
    ]
    students = [
        Student(name="Ali", marks=85),
        Student(name="Saira", marks=92),
        Student(name="Akhtar", marks=78),
    ]
    employees = [
        Employee(name="Ali", salary=50000),
        Employee(name="Saira", salary=65000),
        Employee(name="Akhtar", salary=80000),
    ]
    return [
        Example(section, "Squares", [square(n) for n in numbers]),
        Example(section, "Even numbers", [n for n in numbers if n % 2 == 0]),
        Example(section, "Sum", sum_array(numbers)),
        Example(
            section,
            "Filtered and scaled",
            filter_map([10, 20, 30, 40, 50], lambda x: x > 25, lambda x: x / 10),
        ),
        Example(
            section, "Frequency", frequency_count(["js", "python", "js", "c++"])
        ),
        Example(
            section,
            "Sorted items",
            [item.name for item in sort_by_field(items, "price")],
        ),
        Example(
            section,
            "Top students",
            filter_map(students, lambda s: s.marks > 80, lambda s: s.name),
        ),
        Example(
            section,
            "Found",
            find_first(students, lambda s: s.name == "Saira"),
        ),
        Example(
            section,
            "High earners",
            filter_map(
                employees, lambda e: e.salary > 60000, lambda e: e.name.upper()
            ),
        ),
        Example(section, "Unique", unique([1, 1, 2, 3, 3, 4])),
        Example(section, "Matrix sum", matrix_sum([[1, 2], [3, 4]])),
        Example(
            section,
            "Chained result",
            map_filter_reduce_chain(
                numbers, lambda x: x > 2, lambda x: x * 2, lambda a, b: a + b
            ),
        ),
    ]


def _advanced(settings: Settings) -> tp.List[Example]:
    section = "Advanced"
    counter = memoized_counter()
    fired: tp.List[str] = []
    timer = schedule_once(fired.append, settings.DEMO_DELAY, "Executed after delay")
    timer.join()

    examples = [
        Example(section, "Curried add", add_three(2)(3)(4)),
        Example(section, "Compose(5)", compose(lambda x: x * 2, lambda x: x + 1)(5)),
        Example(section, "Compose(4)", compose(lambda x: x * 3, lambda x: x + 2)(4)),
        Example(section, "Counter++", counter.increment()),
        Example(section, "Counter--", counter.decrement()),
        Example(section, "Factorial(5)", factorial(5)),
        Example(
            section,
            "City",
            get_city(Profile(address=Address(city="Skardu"))),
        ),
        Example(section, "Display user", display_user({"name": "Ali", "age": 25})),
        Example(section, "Display empty user", display_user({})),
        Example(
            section,
            "Pipeline result",
            pipeline(5).double().increment().double().get(),
        ),
        Example(section, "Operate add", operate(5, 3, add)),
        Example(section, "Operate multiply", operate(5, 3, multiply)),
        Example(section, "Deferred", fired[0] if fired else None),
        Example(
            section,
            "Async",
            asyncio.run(resolve_after("Fetched Data Successfully")),
        ),
    ]

    try:
        examples.append(Example(section, "Safe divide(10, 2)", divide(10, 2)))
        examples.append(Example(section, "Safe divide(10, 0)", divide(10, 0)))
    except ArrowkitError as e:
        logger.error(f"Example failed: {e}")
        examples.append(
            Example(section, "Safe divide(10, 0)", f"{type(e).__name__}: {e}")
        )
    return examples


def _practice() -> tp.List[Example]:
    section = "Practice"
    return [
        Example(section, "Multiply", multiply(3, 4)),
        Example(section, "Subtract", subtract(10, 3)),
        Example(section, "Divide", divide(8, 2)),
        Example(section, "Is positive", is_positive(-5)),
        Example(section, "Uppercase", to_upper("arrow")),
        Example(section, "Sum array", sum_array([1, 2, 3, 4])),
        Example(section, "Max", find_max([3, 7, 2])),
        Example(section, "Vowels", count_vowels("JavaScript")),
        Example(section, "Reverse", reverse("Arrow")),
        Example(section, "Factorial", factorial(6)),
    ]


def collect_examples(settings: tp.Optional[Settings] = None) -> tp.List[Example]:
    """Evaluate every example in display order.

    Settings default to :meth:`Settings.load`. The async example is driven with
    ``asyncio.run``, so this must not be called from inside a running event
    loop. The check happens before any example is evaluated.

    Raises:
        RuntimeError: If called while an event loop is running.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError("collect_examples() cannot run inside an event loop")
    settings = settings or Settings.load()
    return _basics() + _sequences() + _advanced(settings) + _practice()


def render(
    examples: tp.Iterable[Example], console: tp.Optional[Console] = None
) -> None:
    """Print examples as a table, one row per labelled value."""
    table = Table(title="Arrowkit examples")
    table.add_column("Section", style="cyan")
    table.add_column("Example")
    table.add_column("Value", style="green")
    for example in examples:
        table.add_row(example.section, example.label, Text(str(example.value)))
    (console or Console()).print(table)


def main():
    """Main function to run the examples."""
    settings = Settings.load()
    setup_logger(level=settings.LOG_LEVEL)
    logger.info("Running Arrowkit examples...")
    render(collect_examples(settings))


if __name__ == "__main__":
    main()
