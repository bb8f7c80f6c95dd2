"""
minimal test harness for the filterable test modules.

modules register cases with @test("description") and end with
`suite.main("title")`, so each file runs as a plain script. the same
functions are collected by pytest, which ignores the harness itself.
"""

import sys
import time
import traceback
from typing import List, Any, Callable, Optional, Tuple, Type

GREEN, RED, YELLOW, BLUE, GREY, RESET = (
    '\033[92m', '\033[91m', '\033[93m', '\033[94m', '\033[90m', '\033[0m'
)

# (description, function) pairs in registration order
_cases: List[Tuple[str, Callable[[], Any]]] = []


class TestAssertionError(AssertionError):
    """a failed check, as opposed to an unexpected exception."""
    __test__ = False


def test(description: str) -> Callable:
    """register the decorated function as a case; the function is returned unchanged."""

    def register(func: Callable) -> Callable:
        _cases.append((description, func))
        return func

    return register


# modules alias this as `test`; pytest must not mistake it for a case
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """fail the current case with message unless condition is truthy."""
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and require it to raise error_type; returns the caught error."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def _outcome(func: Callable[[], Any], show_tracebacks: bool) -> Optional[str]:
    """run one case, returning None on success or a one-line reason."""
    try:
        func()
    except TestAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        if show_tracebacks:
            traceback.print_exc()
        return f"{type(e).__name__}: {e}"
    return None


def run(title: str = "test run", verbose_errors: bool = False) -> bool:
    """run every registered case, print a report, and return True when all pass."""
    print(f"\n{BLUE}--- {title} ---{RESET}")
    started = time.perf_counter()

    failures = 0
    for description, func in _cases:
        reason = _outcome(func, verbose_errors)
        if reason is None:
            print(f"  {GREEN}pass{RESET}  {description}")
        else:
            failures += 1
            print(f"  {RED}FAIL{RESET}  {description}")
            print(f"    {GREY}-> {reason}{RESET}")

    elapsed_ms = (time.perf_counter() - started) * 1000
    colour = GREEN if failures == 0 else RED
    print(f"\n{colour}{len(_cases)} cases, {failures} failed{RESET} "
          f"in {YELLOW}{elapsed_ms:.2f}ms{RESET}\n")

    # a later run in the same process starts from an empty registry
    _cases.clear()
    return failures == 0


def main(title: str) -> None:
    """script entry point; exits non-zero on any failure. pass -v for tracebacks."""
    sys.exit(0 if run(title, verbose_errors='-v' in sys.argv) else 1)
