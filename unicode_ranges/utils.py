import array
import functools
import logging
import sys
import threading
import time
from typing import Callable, Iterable, Sequence, TypeVar

# ---- typing ----

# Internal/output types
CodeUnitArray = array.array  # [int], typecode "H"

# inputs more flexible
CodeUnitSeq = Sequence[int]

T = TypeVar("T")


def code_unit_array(values: Iterable[int] = ()) -> CodeUnitArray:
    return array.array("H", values)


# ---- lazy singletons ----


def build_once(builder: Callable[[], T]) -> Callable[[], T]:
    """
    Wrap a zero-argument builder so it runs exactly once per process.
    Every caller, on any thread, receives the same fully constructed result.
    """
    lock = threading.Lock()
    built: list[T] = []

    @functools.wraps(builder)
    def get() -> T:
        if not built:
            with lock:
                if not built:
                    built.append(builder())
        return built[0]

    get.is_built = lambda: bool(built)  # type: ignore[attr-defined]
    return get


# ---- logging ----


def create_logger(tag: str, verbose: bool = True):
    default_fields = logging.getLogRecordFactory()
    t0 = time.perf_counter()

    # https://stackoverflow.com/questions/63056270/python-logging-time-since-start-in-seconds
    def record_factory(*args, **kwargs):
        record = default_fields(*args, **kwargs)
        record.uptime = time.perf_counter() - t0
        record.level_nocaps = record.levelname.lower()
        return record

    logging.setLogRecordFactory(record_factory)
    logger = logging.getLogger(f"unicode_ranges.{tag}")
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        formatter = logging.Formatter(f"[%(uptime)6.1fs][{tag}] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def set_verbose(logger: logging.Logger, verbose: bool) -> None:
    for handler in logger.handlers:
        handler.setLevel(logging.DEBUG if verbose else logging.INFO)


# ---- formatting ----


def format_code_point(value: int) -> str:
    return f"U+{value:04X}"
