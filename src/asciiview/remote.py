"""Fetch a remote image into a local cache file while a spinner runs.

The download happens on a worker thread that hands exactly one
:class:`FetchResult` back over a queue and then closes it with ``None``.
The calling thread opens the cache file first, waits for the result, and
after a successful write keeps reading the queue until the close marker so
the worker is never left behind.
"""

import logging
import queue
import random
import threading
from dataclasses import dataclass
from pathlib import Path

import requests

from asciiview.charsets import CONSONANTS, VOWELS
from asciiview.spinner import Spinner

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = "/tmp"
NAME_PREFIX = "img.goski_"
NAME_SYLLABLES = 3


class FetchError(Exception):
    """A remote image could not be downloaded."""


class ResourceNotFoundError(FetchError):
    def __init__(self, url: str, status: int):
        super().__init__("Could not find resource")
        self.url = url
        self.status = status


@dataclass(frozen=True)
class FetchResult:
    payload: bytes | None = None
    error: BaseException | None = None

    def __post_init__(self):
        if (self.payload is None) == (self.error is None):
            raise ValueError("FetchResult needs exactly one of payload or error")


def generate_name(rng=random) -> str:
    """Random consonant-vowel file name, e.g. ``img.goski_kabemo``."""
    syllables = "".join(rng.choice(CONSONANTS) + rng.choice(VOWELS) for _ in range(NAME_SYLLABLES))
    return NAME_PREFIX + syllables


def _wrap(message: str, cause: Exception) -> FetchError:
    error = FetchError(f"{message}: {cause}")
    error.__cause__ = cause
    return error


def _download(session, url: str, timeout: float | None) -> FetchResult:
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        return FetchResult(error=_wrap(f"Failed to fetch {url}", e))

    with response:
        if response.status_code != 200:
            logger.debug("%s answered %d", url, response.status_code)
            return FetchResult(error=ResourceNotFoundError(url, response.status_code))
        try:
            body = response.content
        except requests.RequestException as e:
            return FetchResult(error=_wrap(f"Failed to read body of {url}", e))
    return FetchResult(payload=body)


def _worker(session, url: str, timeout: float | None, results: queue.Queue):
    try:
        result = _download(session, url, timeout)
    except Exception as e:
        result = FetchResult(error=e)
    results.put(result)
    results.put(None)


def _drain(results: queue.Queue):
    """Read until the worker's close marker, raising any error found on the way."""
    while (item := results.get()) is not None:
        if item.error is not None:
            raise item.error


def fetch_remote(
    url: str,
    directory: str | Path = DEFAULT_CACHE_DIR,
    stream=None,
    session=None,
    timeout: float | None = None,
    rng=random,
) -> Path:
    """Download ``url`` into ``directory`` and return the path of the cached file.

    Raises :class:`ResourceNotFoundError` for non-200 responses, :class:`FetchError`
    for transport failures and ``OSError`` if the cache file can't be written.
    The cache file is left in place for the caller.
    """
    session = session or requests.Session()
    results: queue.Queue[FetchResult | None] = queue.Queue()
    path = Path(directory) / generate_name(rng)
    logger.debug("fetching %s into %s", url, path)

    with Spinner(stream):
        worker = threading.Thread(target=_worker, args=(session, url, timeout, results), name="fetch", daemon=True)
        worker.start()

        with path.open("wb") as f:
            result = results.get()
            if result.error is not None:
                # the close marker is still pending; collect it so the worker can finish
                results.get()
                raise result.error
            f.write(result.payload)

        _drain(results)

    logger.debug("wrote %d bytes to %s", len(result.payload), path)
    return path
