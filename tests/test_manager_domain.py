import logging
import threading
import time

import pytest

from hashcrack.manager.domain import (
    HashUseCase,
    RequestNotFoundError,
    Status,
    WorkersUnavailableError,
)
from hashcrack.transport import DeliveryError

LOGGER = logging.getLogger("test.manager.domain")
URLS = ["w1", "w2", "w3"]


class StubRepository:
    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []
        self._lock = threading.Lock()

    def send_task_to_worker(self, worker_url, task):
        with self._lock:
            self.calls.append((worker_url, task))
        if worker_url in self.failing:
            raise DeliveryError("down")

    def delivered(self):
        return [(url, task) for url, task in self.calls if url not in self.failing]


def make(repository, ttl=60, alphabet="ab"):
    return HashUseCase(3, URLS, alphabet, ttl, repository, LOGGER)


def test_split_task_covers_every_part():
    use_case = make(StubRepository())
    tasks = use_case.split_task("rid", "hash", 4)
    assert [task.part_number for task in tasks] == [0, 1, 2]
    assert {task.part_count for task in tasks} == {3}
    assert {(task.request_id, task.hash, task.alphabet, task.max_length) for task in tasks} == {
        ("rid", "hash", "ab", 4)
    }


def test_crack_hash_sends_each_part_to_its_worker():
    repository = StubRepository()
    use_case = make(repository)
    result = use_case.crack_hash("hash", 3)
    assert result.status is Status.IN_PROGRESS
    assert sorted((url, task.part_number) for url, task in repository.calls) == [
        ("w1", 0),
        ("w2", 1),
        ("w3", 2),
    ]
    assert {task.request_id for _, task in repository.calls} == {result.request_id}
    assert use_case.get_status(result.request_id).status is Status.IN_PROGRESS


def test_crack_hash_fails_over_to_another_worker():
    repository = StubRepository(failing={"w1"})
    use_case = make(repository)
    use_case.crack_hash("hash", 2)
    delivered = repository.delivered()
    assert sorted(task.part_number for _, task in delivered) == [0, 1, 2]
    assert ("w2", 0) in [(url, task.part_number) for url, task in delivered]


def test_crack_hash_raises_when_all_workers_down():
    repository = StubRepository(failing=set(URLS))
    use_case = make(repository)
    with pytest.raises(WorkersUnavailableError):
        use_case.crack_hash("hash", 2)
    assert repository.delivered() == []


def test_get_status_unknown_request():
    with pytest.raises(RequestNotFoundError):
        make(StubRepository()).get_status("missing")


def test_update_request_unknown_request():
    with pytest.raises(RequestNotFoundError):
        make(StubRepository()).update_request("missing", ["x"])


def test_updates_collect_words_until_ready():
    use_case = make(StubRepository())
    request_id = use_case.crack_hash("hash", 2).request_id
    use_case.update_request(request_id, ["ab"])
    use_case.update_request(request_id, [])
    partial = use_case.get_status(request_id)
    assert partial.status is Status.IN_PROGRESS
    assert partial.completed_workers == 2
    use_case.update_request(request_id, ["ba"])
    done = use_case.get_status(request_id)
    assert done.status is Status.READY
    assert done.data == ["ab", "ba"]


def test_get_status_returns_a_copy():
    use_case = make(StubRepository())
    request_id = use_case.crack_hash("hash", 2).request_id
    use_case.update_request(request_id, ["ab"])
    use_case.get_status(request_id).data.append("zz")
    assert use_case.get_status(request_id).data == ["ab"]


def test_expire_without_answers_is_error():
    use_case = make(StubRepository())
    request_id = use_case.crack_hash("hash", 2).request_id
    use_case.expire_request(request_id)
    assert use_case.get_status(request_id).status is Status.ERROR


def test_expire_with_some_answers_is_partial():
    use_case = make(StubRepository())
    request_id = use_case.crack_hash("hash", 2).request_id
    use_case.update_request(request_id, ["ab"])
    use_case.expire_request(request_id)
    assert use_case.get_status(request_id).status is Status.PARTIAL_READY


def test_expire_leaves_ready_request_alone():
    use_case = make(StubRepository())
    request_id = use_case.crack_hash("hash", 2).request_id
    for _ in range(3):
        use_case.update_request(request_id, [])
    use_case.expire_request(request_id)
    assert use_case.get_status(request_id).status is Status.READY


def test_ttl_expires_request_automatically():
    use_case = make(StubRepository(), ttl=0.05)
    request_id = use_case.crack_hash("hash", 2).request_id
    deadline = time.monotonic() + 3
    while time.monotonic() < deadline:
        if use_case.get_status(request_id).status is not Status.IN_PROGRESS:
            break
        time.sleep(0.02)
    assert use_case.get_status(request_id).status is Status.ERROR