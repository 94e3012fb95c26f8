"""Named checks exercising the keyed trie, and the runner executing them."""

import logging
import time
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import NamedTuple

from src.custom_data_structures.Trie.Trie import Trie, TrieNode

from .logger import log


class SelfCheckFailedError(Exception):
    """Raised when an expectation of a check doesn't hold."""


class CheckResult(NamedTuple):
    """The outcome of a single check execution."""

    name: str
    passed: bool
    execution_time_ms: float
    message: str = ""


def expect(condition: bool, message: str) -> None:
    """Raise SelfCheckFailedError with `message` unless `condition` holds."""
    if not condition:
        raise SelfCheckFailedError(message)


def check_node_insert() -> None:
    root: TrieNode[int] = TrieNode("a")
    res = root.insert_child_node("b", TrieNode("b"))

    expect(res is not None, "inserting child 'b' was rejected")
    expect(
        res is not None and res.get_key_char() == "b",
        "inserted child doesn't carry the label 'b'",
    )


def check_node_duplicate_insert() -> None:
    root: TrieNode[int] = TrieNode("a")
    root.insert_child_node("b", TrieNode("b"))

    res = root.insert_child_node("b", TrieNode("b"))
    expect(res is None, "a second child under 'b' was accepted")


def check_node_mismatched_insert() -> None:
    root: TrieNode[int] = TrieNode("a")

    res = root.insert_child_node("d", TrieNode("b"))
    expect(res is None, "child labelled 'b' was accepted under 'd'")
    expect(not root.has_child("d"), "rejected child was stored under 'd'")


def check_node_second_child() -> None:
    root: TrieNode[int] = TrieNode("a")
    root.insert_child_node("b", TrieNode("b"))

    res = root.insert_child_node("c", TrieNode("c"))
    expect(res is not None, "inserting child 'c' was rejected")
    expect(
        res is not None and res.get_key_char() == "c",
        "inserted child doesn't carry the label 'c'",
    )


def check_node_remove() -> None:
    root: TrieNode[int] = TrieNode("a")
    root.insert_child_node("b", TrieNode("b"))
    root.insert_child_node("c", TrieNode("c"))

    root.remove_child_node("b")
    expect(not root.has_child("b"), "child 'b' still present after removal")
    expect(root.has_children(), "child 'c' went missing with 'b'")
    expect(root.get_child_node("b") is None, "child 'b' still reachable")

    root.remove_child_node("c")
    expect(not root.has_child("c"), "child 'c' still present after removal")
    expect(not root.has_children(), "node still has children")
    expect(root.get_child_node("c") is None, "child 'c' still reachable")


def check_trie_random_order_insert() -> None:
    trie: Trie[str] = Trie()
    expected = {"a": "one", "aaa": "three", "aaaa": "four", "aa": "two"}

    for key, value in expected.items():
        expect(trie.insert(key, value), f"inserting '{key}' was rejected")

    for key, value in expected.items():
        found = trie.get_value(key)
        expect(
            found == value,
            f"'{key}' maps to {found!r} instead of {value!r}",
        )


def check_trie_duplicate_insert() -> None:
    trie: Trie[str] = Trie()
    trie.insert("a", "one")

    expect(not trie.insert("a", "one"), "duplicate key 'a' was accepted")
    expect(trie.get_value("a") == "one", "duplicate insert changed 'a'")


ALL_CHECKS: dict[str, Callable[[], None]] = {
    "node_insert": check_node_insert,
    "node_duplicate_insert": check_node_duplicate_insert,
    "node_mismatched_insert": check_node_mismatched_insert,
    "node_second_child": check_node_second_child,
    "node_remove": check_node_remove,
    "trie_random_order_insert": check_trie_random_order_insert,
    "trie_duplicate_insert": check_trie_duplicate_insert,
}


def run_checks(
    checks: Sequence[tuple[str, Callable[[], None]]],
    stop_on_failure: bool = False,
) -> list[CheckResult]:
    """Run the given checks in order and collect their results.

    Args:
        checks (Sequence[tuple[str, Callable[[], None]]]): Pairs of
        check name and check function.
        stop_on_failure (bool): Whether to stop after the first failure.

    Returns:
        list[CheckResult]: One result per executed check.

    """
    results: list[CheckResult] = []

    for name, check in checks:
        time_stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        start = time.perf_counter()
        try:
            check()
            passed, message = True, ""
        except SelfCheckFailedError as e:
            passed, message = False, str(e)
            logging.error("Check '%s' failed: %s", name, message)
        except Exception as e:
            passed, message = False, f"{type(e).__name__}: {e}"
            logging.exception("Check '%s' raised an error", name)
        execution_time_ms = (time.perf_counter() - start) * 1000

        log(time_stamp, name, passed, execution_time_ms)
        results.append(CheckResult(name, passed, execution_time_ms, message))

        if not passed and stop_on_failure:
            break

    return results
