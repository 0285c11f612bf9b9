"""Request bookkeeping and task distribution on the manager side."""

import dataclasses
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from enum import Enum


class Status(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    READY = "READY"
    ERROR = "ERROR"
    PARTIAL_READY = "PARTIAL_READY"


@dataclass
class HashData:
    request_id: str
    status: Status
    data: list = field(default_factory=list)
    completed_workers: int = 0


@dataclass(frozen=True)
class WorkerTask:
    request_id: str
    hash: str
    alphabet: str
    max_length: int
    part_number: int
    part_count: int


class RequestNotFoundError(LookupError):
    """No request with the given id is known."""

    def __init__(self, request_id):
        super().__init__("request not found")
        self.request_id = request_id


class WorkersUnavailableError(RuntimeError):
    """A part of the task could not be delivered to any worker."""

    def __init__(self):
        super().__init__("all workers are unavailable")


def _snapshot(hash_data):
    return dataclasses.replace(hash_data, data=list(hash_data.data))


class HashUseCase:
    """Split crack requests among workers and collect their answers."""

    def __init__(self, workers_count, workers_url, alphabet, ttl, repository, logger):
        self.workers_count = workers_count
        self.workers_url = list(workers_url)
        self.alphabet = alphabet
        self.ttl = ttl
        self.repository = repository
        self.logger = logger
        self._requests = {}
        self._lock = threading.Lock()

    def crack_hash(self, hash_value, max_length):
        """Register a request and hand its parts to the workers.

        Raises WorkersUnavailableError if some part reached no worker.
        """
        with self._lock:
            request_id = str(uuid.uuid4())
            hash_data = HashData(request_id=request_id, status=Status.IN_PROGRESS)
            self._requests[request_id] = hash_data
            result = _snapshot(hash_data)

            tasks = self.split_task(request_id, hash_value, max_length)
            executor = ThreadPoolExecutor(max_workers=max(1, len(tasks)))
            try:
                futures = [
                    executor.submit(self._dispatch, index, task)
                    for index, task in enumerate(tasks)
                ]
                delivered = all(future.result() for future in as_completed(futures))
            finally:
                executor.shutdown(wait=False)
            if not delivered:
                raise WorkersUnavailableError()

        timer = threading.Timer(self.ttl, self.expire_request, args=(request_id,))
        timer.daemon = True
        timer.start()
        return result

    def _dispatch(self, index, task):
        url = self.workers_url[index]
        try:
            self.repository.send_task_to_worker(url, task)
            return True
        except Exception as exc:
            self.logger.error(
                "failed to send task to worker",
                extra={"workerURL": url, "error": str(exc)},
            )
        for other in range(self.workers_count):
            if other == index:
                continue
            try:
                self.repository.send_task_to_worker(self.workers_url[other], task)
                return True
            except Exception:
                continue
        return False

    def get_status(self, request_id):
        """Return a copy of the request's state; raises RequestNotFoundError."""
        with self._lock:
            try:
                return _snapshot(self._requests[request_id])
            except KeyError:
                raise RequestNotFoundError(request_id) from None

    def update_request(self, request_id, data):
        """Record one worker's answer; raises RequestNotFoundError."""
        with self._lock:
            hash_data = self._requests.get(request_id)
            if hash_data is None:
                raise RequestNotFoundError(request_id)
            hash_data.data.extend(data)
            hash_data.completed_workers += 1
            if hash_data.completed_workers == self.workers_count:
                hash_data.status = Status.READY

    def split_task(self, request_id, hash_value, max_length):
        """One task per worker, each naming its part of the word space."""
        return [
            WorkerTask(
                request_id=request_id,
                hash=hash_value,
                alphabet=self.alphabet,
                max_length=max_length,
                part_number=part,
                part_count=self.workers_count,
            )
            for part in range(self.workers_count)
        ]

    def expire_request(self, request_id):
        """Close a request still in progress: partial if any worker answered, else error."""
        with self._lock:
            hash_data = self._requests.get(request_id)
            if hash_data is None or hash_data.status is not Status.IN_PROGRESS:
                return
            hash_data.status = (
                Status.PARTIAL_READY if hash_data.completed_workers > 0 else Status.ERROR
            )
        self.logger.info("request timed out", extra={"requestId": request_id})