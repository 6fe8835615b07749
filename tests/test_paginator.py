import pytest

from contentful_cleanup.errors import FetchFailed
from contentful_cleanup.models import Page
from contentful_cleanup.paginator import fetch_all


class PageStub:
    """page_fetch stand-in serving a fixed list of pages"""

    def __init__(self, total, limit, pages, fail_on_call=None):
        self.total = total
        self.limit = limit
        self.pages = pages
        self.fail_on_call = fail_on_call
        self.skips = []

    def __call__(self, skip):
        self.skips.append(skip)
        if self.fail_on_call == len(self.skips):
            raise FetchFailed("boom", status=500)
        return Page(total=self.total, limit=self.limit, skip=skip, items=self.pages[skip // self.limit])


class RecordingProgress:
    def __init__(self):
        self.events = []

    def start(self, total):
        self.events.append(("start", total))

    def increment(self, item_name=""):
        self.events.append(("increment",))

    def stop(self):
        self.events.append(("stop",))


def test_two_pages_are_joined_in_order():
    stub = PageStub(total=3, limit=2, pages=[["a", "b"], ["c"]])

    collection = fetch_all(stub)

    assert collection.items == ["a", "b", "c"]
    assert collection.total == 3
    assert collection.limit == 2
    assert stub.skips == [0, 2]


@pytest.mark.parametrize("total,limit,expected_calls", [
    (1, 100, 1),
    (100, 100, 1),
    (101, 100, 2),
    (250, 100, 3),
    (7, 3, 3),
])
def test_call_count_is_ceil_of_total_over_limit(total, limit, expected_calls):
    pages = []
    for start in range(0, total, limit):
        pages.append(list(range(start, min(start + limit, total))))
    stub = PageStub(total=total, limit=limit, pages=pages)

    collection = fetch_all(stub)

    assert len(stub.skips) == expected_calls
    assert stub.skips == [i * limit for i in range(expected_calls)]
    assert len(collection.items) == sum(len(p) for p in pages)


def test_empty_collection_makes_one_call():
    stub = PageStub(total=0, limit=100, pages=[[]])

    collection = fetch_all(stub)

    assert stub.skips == [0]
    assert collection.items == []
    assert collection.total == 0


def test_short_pages_are_not_refetched():
    # total claims 4 but the second page only carries one item
    stub = PageStub(total=4, limit=2, pages=[["a", "b"], ["c"]])

    collection = fetch_all(stub)

    assert collection.items == ["a", "b", "c"]
    assert len(stub.skips) == 2


def test_failure_on_third_call_stops_fetching():
    stub = PageStub(total=10, limit=2, pages=[["a", "b"]] * 5, fail_on_call=3)

    with pytest.raises(FetchFailed):
        fetch_all(stub)

    assert stub.skips == [0, 2, 4]


def test_progress_reports_each_page():
    stub = PageStub(total=5, limit=2, pages=[["a", "b"], ["c", "d"], ["e"]])
    progress = RecordingProgress()

    fetch_all(stub, progress)

    assert progress.events == [
        ("start", 3),
        ("increment",),
        ("increment",),
        ("increment",),
        ("stop",),
    ]


def test_progress_is_not_stopped_after_failure():
    stub = PageStub(total=6, limit=2, pages=[["a", "b"]] * 3, fail_on_call=2)
    progress = RecordingProgress()

    with pytest.raises(FetchFailed):
        fetch_all(stub, progress)

    assert progress.events == [("start", 3), ("increment",)]
