# hashcrack

A small distributed service that recovers the plain text behind an MD5 hash
by brute force. A **manager** accepts requests from clients, splits the
search space into parts and hands one part to each **worker**; workers search
their part and report the matching words back to the manager.

Both processes use only the Python standard library.

## Running

Start the workers and a manager:

    hashcrack-worker
    hashcrack-manager

Each process serves two ports: the main API and a probe port that answers
`/healthz` with `200` and the body `success` (any other path gives `404`).
Both stop cleanly on SIGINT or SIGTERM; each server is given five seconds to
stop.

### Manager settings (environment variables)

| Variable            | Default                                   | Meaning                                        |
|---------------------|-------------------------------------------|------------------------------------------------|
| `LOG_LEVEL`         | `info`                                    | `debug`, `info`, `warn` or `error`             |
| `MAIN_SERVER_PORT`  | `8080`                                    | Port of the public API                         |
| `PROBE_SERVER_PORT` | `8081`                                    | Port of the health probe                       |
| `ALPHABET`          | `abcdefghijklmnopqrstuvwxyz0123456789`    | Characters the candidate words are built from  |
| `TTL`               | `10`                                      | Seconds before an unfinished request times out |
| `WORKER_COUNT`      | `3`                                       | Number of parts a request is split into        |
| `WORKER_URLS`       | `worker1:8080,worker2:8080,worker3:8080`  | Comma-separated base URLs of the workers       |

### Worker settings (environment variables)

| Variable            | Default        | Meaning                               |
|---------------------|----------------|---------------------------------------|
| `LOG_LEVEL`         | `info`         | `debug`, `info`, `warn` or `error`    |
| `MAIN_SERVER_PORT`  | `8080`         | Port that receives tasks              |
| `PROBE_SERVER_PORT` | `8081`         | Port of the health probe              |
| `MANAGER_URL`       | `manager:8080` | Base URL of the manager               |

A base URL without a scheme is reached over plain `http://`. An unknown
`LOG_LEVEL` means `info`; a port, `TTL` or `WORKER_COUNT` that is not an
integer stops the process with a `ConfigError`. Logs are written to standard
output as JSON lines.

## Public API (manager)

Start a search:

    POST /api/hash/crack
    Content-Type: application/json

    {"hash": "e2fc714c4727ee9395f324cd2e7f331f", "maxLength": 4}

Response:

    {"requestId":"0b6c4b3e-..."}

A body that is not a JSON object, or whose fields have the wrong types,
gives `400`.

Ask for the result (`GET` or `HEAD`):

    GET /api/hash/status?requestId=0b6c4b3e-...

Response:

    {"status":"READY","data":["abcd"]}

`status` is one of:

- `IN_PROGRESS` – workers are still searching;
- `READY` – every worker has reported;
- `PARTIAL_READY` – the TTL ran out after some, but not all, workers reported;
- `ERROR` – the TTL ran out before any worker reported.

`data` is `null` for `ERROR` and whenever no word has been found yet.
A missing `requestId` gives `400`; an unknown one gives `500`.

Candidate words are exactly `maxLength` characters long, drawn from the
configured alphabet. If a task part cannot be delivered to its worker, the
manager tries the other workers in turn; if none accepts it, the crack
request fails with HTTP 500.

## Internal API

These endpoints carry XML between manager and workers:

- `POST /internal/api/worker/hash/crack/task` on a worker receives a
  `WorkerRequest` (`RequestId`, `Hash`, `Alphabet`, `MaxLength`,
  `PartNumber`, `PartCount`) and answers `200` at once; the search runs in
  a background thread.
- `PATCH /internal/api/manager/hash/crack/request` on the manager receives a
  `WorkerResponse` (`RequestId` and one `Data` element per found word).

Malformed XML gives `400`; a wrong method gives `405`.

## Using the pieces from Python

The building blocks can be used directly, for example to search a part of
the space in-process:

```python
import logging

from hashcrack.worker.domain import Task, TaskCrackerUseCase, compute_md5

task = Task(
    request_id="example",
    hash=compute_md5("ab"),
    alphabet="abc",
    max_length=2,
    part_number=0,
    part_count=1,
)
cracker = TaskCrackerUseCase(repository=None, logger=logging.getLogger("example"))
print(cracker.search(task))  # ['ab']
```

- `hashcrack.worker.domain`: `word_by_index`, `part_bounds` and
  `compute_md5` describe how the search space is enumerated and divided.
- `hashcrack.manager.domain`: `HashUseCase` keeps the state of every request
  (`crack_hash`, `get_status`, `update_request`, `expire_request`).
- `hashcrack.messages`: the XML and JSON messages.
- `hashcrack.httpserver.Server`: the threaded WSGI server both processes use.

## What it does not do

Request state lives only in the manager's memory: it is lost when the
manager stops, and finished requests are never removed. Words of lengths
shorter than `maxLength` are not searched. There is no authentication on
any endpoint.