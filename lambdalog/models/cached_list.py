"""List data source that serves cached content first and refreshes it in the background"""

import dataclasses
import logging
import queue
import threading
from typing import Any, Callable, Generic, Protocol, TypeVar

from lambdalog.models.account import AccountContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated remote listing"""

    items: list[T]
    next_token: str | None = None


PageFetcher = Callable[[str | None], Page[T]]


class CacheStore(Protocol):
    """Durable name lists keyed by entity kind and account context"""

    def read(self, kind: str, context: AccountContext) -> list[str] | None:
        """Read the cached names, or None when there are none"""

    def write(self, kind: str, context: AccountContext, names: list[str]) -> None:
        """Overwrite the cached names"""


def paginate(fetch_page: PageFetcher[T]) -> list[T]:
    """Fetch every page of a listing, following continuation tokens

    Pages are concatenated in order. An empty page that still carries a
    token does not end the listing.
    """
    items: list[T] = []
    token: str | None = None
    while True:
        page = fetch_page(token)
        items.extend(page.items)
        if page.next_token is None:
            return items
        token = page.next_token


class RefreshTask(Generic[T]):
    """Handle of a full refresh running on a background thread

    The fetched list is handed over through a queue and picked up by the UI
    thread with poll().
    """

    def __init__(self) -> None:
        self._results: queue.Queue[list[T]] = queue.Queue()
        self._done = threading.Event()
        self.error: BaseException | None = None

    @classmethod
    def completed(cls) -> "RefreshTask[T]":
        """Create a task with nothing left to do"""
        task: RefreshTask[T] = cls()
        task._done.set()  # pylint: disable=protected-access
        return task

    @property
    def done(self) -> bool:
        """Check if the refresh has finished, successfully or not"""
        return self._done.is_set()

    @property
    def failed(self) -> bool:
        """Check if the refresh finished with an error"""
        return self.done and self.error is not None

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the refresh to finish"""
        return self._done.wait(timeout)

    def poll(self) -> list[T] | None:
        """Get the refreshed list if it arrived since the last poll"""
        result = None
        while True:
            try:
                result = self._results.get_nowait()
            except queue.Empty:
                return result

    def _run(self, refresh: Callable[[], list[T]]) -> None:
        try:
            self._results.put(refresh())
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.exception("Background refresh failed")
            self.error = e
        finally:
            self._done.set()

    def start(self, refresh: Callable[[], list[T]], name: str) -> None:
        """Run the refresh on a daemon thread"""
        threading.Thread(target=self._run, args=(refresh,), name=name, daemon=True).start()


class CachedListSource(Generic[T]):  # pylint: disable=too-many-instance-attributes
    """Materialized list of one entity kind for an account context

    A load serves the cached names immediately and refreshes them from the
    remote source in the background. Without a cache entry the remote fetch
    happens synchronously. The list is only ever replaced as a whole.

    Starting a second load while a refresh is still running lets both
    finish and write the cache, but only the latest load's result is
    swapped in.
    """

    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        kind: str,
        fetcher: Callable[[AccountContext], PageFetcher[T]],
        cache: CacheStore | None = None,
        sort_key: Callable[[T], Any] | None = None,
        to_name: Callable[[T], str] = str,
        from_name: Callable[[str], T] = lambda name: name,  # type: ignore[assignment,return-value]
    ) -> None:
        self.kind = kind
        self._fetcher = fetcher
        self._cache = cache
        self._sort_key = sort_key
        self._to_name = to_name
        self._from_name = from_name
        self._lock = threading.Lock()
        self._items: list[T] = []
        self._task: RefreshTask[T] = RefreshTask.completed()
        self._finish_reported = True

    @property
    def items(self) -> list[T]:
        """Get a snapshot of the current list"""
        with self._lock:
            return self._items.copy()

    @property
    def task(self) -> RefreshTask[T]:
        """Get the latest refresh task"""
        return self._task

    @property
    def refreshing(self) -> bool:
        """Check if a background refresh is still running"""
        return not self._task.done

    def _replace(self, items: list[T]) -> None:
        with self._lock:
            self._items = items

    def load(self, context: AccountContext) -> tuple[list[T], RefreshTask[T]]:
        """Load the list for a context

        Returns the list to show right away and the task refreshing it.
        Raises FetchError if there is no cache entry and the fetch fails.
        """
        cached = self._read_cache(context)
        if cached is None:
            logger.info("No cached %s for %s, fetching", self.kind, context.label)
            items = self._fetch(context)
            self._replace(items)
            self._task = RefreshTask.completed()
            self._finish_reported = True
            return items.copy(), self._task

        logger.info("Loaded %d cached %s for %s", len(cached), self.kind, context.label)
        self._replace(cached)
        self._task = RefreshTask()
        self._finish_reported = False
        self._task.start(lambda: self._fetch(context), name=f"refresh-{self.kind}")
        return cached.copy(), self._task

    def sync(self) -> bool:
        """Swap in the result of a finished background refresh

        Returns True if the list changed, and once more when the refresh
        finishes (successfully or not) so its state can be redrawn.
        """
        # A done task has already queued its result, so check before polling
        finished = self._task.done and not self._finish_reported
        refreshed = self._task.poll()
        if refreshed is not None:
            self._replace(refreshed)
        if finished:
            self._finish_reported = True
        return refreshed is not None or finished

    def _fetch(self, context: AccountContext) -> list[T]:
        items = paginate(self._fetcher(context))
        if self._sort_key is not None:
            items.sort(key=self._sort_key)
        logger.info("Fetched %d %s for %s", len(items), self.kind, context.label)
        self._write_cache(context, items)
        return items

    def _read_cache(self, context: AccountContext) -> list[T] | None:
        if self._cache is None:
            return None
        try:
            names = self._cache.read(self.kind, context)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.warning("Reading cached %s failed", self.kind, exc_info=True)
            return None
        if names is None:
            return None
        return [self._from_name(name) for name in names]

    def _write_cache(self, context: AccountContext, items: list[T]) -> None:
        if self._cache is None:
            return
        try:
            self._cache.write(self.kind, context, [self._to_name(item) for item in items])
        except Exception:  # pylint: disable=broad-exception-caught
            logger.warning("Writing cached %s failed", self.kind, exc_info=True)
