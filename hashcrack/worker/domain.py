"""Brute-force search over one part of the word space."""

import hashlib
import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    request_id: str
    hash: str
    alphabet: str
    max_length: int
    part_number: int
    part_count: int


def compute_md5(text):
    """Hex MD5 digest of the UTF-8 text."""
    return hashlib.md5(text.encode()).hexdigest()


def word_by_index(index, alphabet, max_length):
    """The word of exactly max_length characters numbered index in base len(alphabet)."""
    base = len(alphabet)
    letters = []
    for _ in range(max_length):
        index, digit = divmod(index, base)
        letters.append(alphabet[digit])
    return "".join(reversed(letters))


def part_bounds(task):
    """Half-open index range [start, end) handled by this task's part."""
    total = len(task.alphabet) ** task.max_length
    chunk = total // task.part_count
    start = chunk * task.part_number
    end = chunk * (task.part_number + 1)
    if task.part_number == task.part_count - 1:
        end = total
    return start, end


class TaskCrackerUseCase:
    """Search a task's share of words and report matches to the manager."""

    def __init__(self, repository, logger):
        self.repository = repository
        self.logger = logger

    def search(self, task):
        """Return the words in this part whose MD5 equals the task's hash."""
        start, end = part_bounds(task)
        self.logger.info(
            "starting task",
            extra={
                "requestId": task.request_id,
                "partNumber": task.part_number,
                "startIndex": start,
                "endIndex": end,
            },
        )
        found = []
        for index in range(start, end):
            word = word_by_index(index, task.alphabet, task.max_length)
            digest = compute_md5(word)
            if digest == task.hash:
                found.append(word)
                self.logger.info("found matching word", extra={"word": word, "hash": digest})
        return found

    def _process(self, task):
        words = self.search(task)
        try:
            self.repository.send_cracked_task_to_manager(task.request_id, words)
        except Exception as exc:  # the search runs detached; failures are only reported
            self.logger.error(
                "failed to send cracked words to manager", extra={"error": str(exc)}
            )
        self.logger.info(
            "task completed",
            extra={"requestId": task.request_id, "partNumber": task.part_number},
        )

    def crack_task(self, task):
        """Start the search in the background and return its thread."""
        thread = threading.Thread(target=self._process, args=(task,), daemon=True)
        thread.start()
        return thread