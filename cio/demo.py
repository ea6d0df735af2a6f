"""
Demonstration of printf with the built-in container types.

Usage:
    python -m cio.demo
    python -m cio.demo --interactive
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import math
from collections import Counter, OrderedDict, deque
from dataclasses import dataclass
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .printf import printf
from .prompt import parse_char, prompt

RULE = "-" * 48


@dataclass
class Person:
    name: str
    age: int

    def greet(self) -> str:
        return f"Hello, my name is {self.name} and I am {self.age} years old"


# Methods --------------------------------------------------------------------------------------------------------------


def ask_person() -> dict[str, Any]:
    """Collect the personal details interactively."""
    return dict(
        first_name=prompt("Your first name: "),
        last_name=prompt("Your last name: "),
        age=prompt("Your age: ", int),
        height=prompt("Your height (in meters): ", float),
        married=prompt("Are you married? (true/false): ", bool),
        letter=prompt("What is your favorite letter? ", parse_char),
    )


def sample_person() -> dict[str, Any]:
    return dict(first_name="Ada", last_name="Lovelace", age=36, height=1.65, married=True, letter="a")


def demo_values(person: dict[str, Any]) -> None:
    printf("1. Simple values:\n")
    status = "you are" if person["married"] else "you are not"
    printf(
        "Hello, {first_name} {last_name}, you are {age} years old, you are {height} m tall, "
        "your favorite letter is '{letter}', and {0} married.\n",
        status,
        **person,
    )
    printf("{0}\n", RULE)

    printf("2. References into values:\n")
    printf("Last name in uppercase: {last_name.upper()}\n", **person)
    printf("First letter of the last name: {last_name[0]}\n", **person)
    printf("Is your favorite letter uppercase? {letter.isupper()}\n", **person)
    printf("Age in months: {0}\n", person["age"] * 12)
    printf("Height in cm: {0:.0}\n", person["height"] * 100)
    printf("{0}\n", RULE)

    printf("3. Number formatting:\n")
    printf("PI without format: {pi}\n", pi=math.pi)
    printf("PI with 2 decimals: {pi:.2}\n", pi=math.pi)
    printf("PI with 6 decimals: {pi:.6}\n", pi=math.pi)
    printf("Integer with padding: {age:04}\n", **person)
    printf("Integer as hexadecimal: {age:x}\n", **person)
    printf("Integer as binary: {age:b}\n", **person)
    printf("Float with scientific notation: {pi:e}\n", pi=math.pi)
    printf("{0}\n", RULE)


def demo_sequences() -> None:
    printf("4. Array-like containers:\n")
    vector = [1, 2, 3, 4, 5]
    queue = deque([0, 1, 2, 3])
    matrix_2d = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    matrix_3d = [[[1, 2], [3, 4]], [[5, 6], [7, 8]]]
    matrix_4d = [
        [[[1, 2], [3, 4]], [[5, 6], [7, 8]]],
        [[[9, 10], [11, 12]], [[13, 14], [15, 16]]],
    ]
    printf("List:  {0:a}\nDeque: {1:a}\n", vector, queue)
    for name, matrix in (("2D", matrix_2d), ("3D", matrix_3d), ("4D", matrix_4d)):
        printf("{0} matrix (:a):\n{1:a}\n{0} matrix (:c): {1:c}\n", name, matrix)
    printf("Matrix element [1][0][1][0]: {m[1][0][1][0]}\n", m=matrix_4d)
    printf("{0}\n", RULE)


def demo_mappings() -> None:
    printf("5. Map-like containers:\n")
    capitals = {"France": "Paris", "Germany": "Berlin", "Italy": "Rome"}
    ordered = OrderedDict(A=1, B=2, C=3)
    fruits = {"apple", "banana", "orange"}
    cities = {
        "France": {"Paris": {"population": "2.2M", "attractions": "Eiffel Tower, Louvre"}},
        "USA": {"New York": {"population": "8.4M", "attractions": "Statue of Liberty, Times Square"}},
    }
    printf("Dict:\n{0:j}\nOrderedDict:\n{1:j}\nSet:\n{2:j}\n", capitals, ordered, fruits)
    printf("Dict (:c): {0:c}\nDict (:a): {0:a}\n", capitals)
    printf("Capital of France: {0.get('France')}\n", capitals)
    printf("Is 'apple' in the set? {0.__contains__('apple')}\n", fruits)
    printf("Nested (:a):\n{0:a}\n", cities)
    printf("Population of Paris: {0['France']['Paris']['population']}\n", cities)
    printf("{0}\n", RULE)


def demo_records() -> None:
    printf("6. Records:\n")
    people = [Person("Alice", 30), Person("Bob", 25), Person("Charlie", 35), Person("Diana", 28)]
    average = sum(p.age for p in people) / len(people)
    people.sort(key=lambda p: p.age)
    printf("Average age: {0:.1}\n", average)
    printf("Names sorted by age: {0}\n", ", ".join(p.name for p in people))
    printf("Greeting: {0.greet()}\n", people[0])
    printf("People (:j):\n{0:j}\n", people)
    printf("Ages (:c): {0:c}\n", Counter(p.age // 10 * 10 for p in people))
    printf("{0}\n", RULE)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Demonstrate printf formatting directives", prog="python -m cio.demo"
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Ask for personal details on stdin"
    )
    args = parser.parse_args(argv)

    printf("=== Demonstration of printf with built-in containers ===\n")
    demo_values(ask_person() if args.interactive else sample_person())
    demo_sequences()
    demo_mappings()
    demo_records()
    printf("=== End of the demonstration ===\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
