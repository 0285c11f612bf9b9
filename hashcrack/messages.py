"""Wire messages exchanged between manager, workers and clients."""

import json
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

_INT = re.compile(r"[+-]?\d+")


class MessageError(ValueError):
    """A message could not be decoded."""


def _parse_xml(data):
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise MessageError(f"invalid XML: {exc}") from exc


def _text(root, tag):
    element = root.find(tag)
    return "" if element is None or element.text is None else element.text


def _int(root, tag):
    raw = _text(root, tag).strip()
    if not raw:
        return 0
    if not _INT.fullmatch(raw):
        raise MessageError(f"invalid integer in {tag}: {raw!r}")
    return int(raw)


def _serialize(root):
    return ET.tostring(root, encoding="unicode", short_empty_elements=False).encode()


def _add(root, tag, value):
    ET.SubElement(root, tag).text = str(value)


@dataclass
class WorkerRequest:
    request_id: str = ""
    hash: str = ""
    alphabet: str = ""
    max_length: int = 0
    part_number: int = 0
    part_count: int = 0

    def to_xml(self):
        root = ET.Element("WorkerRequest")
        _add(root, "RequestId", self.request_id)
        _add(root, "Hash", self.hash)
        _add(root, "Alphabet", self.alphabet)
        _add(root, "MaxLength", self.max_length)
        _add(root, "PartNumber", self.part_number)
        _add(root, "PartCount", self.part_count)
        return _serialize(root)

    @classmethod
    def from_xml(cls, data):
        root = _parse_xml(data)
        return cls(
            request_id=_text(root, "RequestId"),
            hash=_text(root, "Hash"),
            alphabet=_text(root, "Alphabet"),
            max_length=_int(root, "MaxLength"),
            part_number=_int(root, "PartNumber"),
            part_count=_int(root, "PartCount"),
        )


@dataclass
class WorkerResponse:
    request_id: str = ""
    words: list = field(default_factory=list)

    def to_xml(self):
        root = ET.Element("WorkerResponse")
        _add(root, "RequestId", self.request_id)
        for word in self.words:
            _add(root, "Data", word)
        return _serialize(root)

    @classmethod
    def from_xml(cls, data):
        root = _parse_xml(data)
        words = [element.text or "" for element in root.findall("Data")]
        return cls(request_id=_text(root, "RequestId"), words=words)


@dataclass
class CrackHashRequest:
    hash: str = ""
    max_length: int = 0

    @classmethod
    def from_json(cls, data):
        try:
            payload = json.loads(data)
        except (ValueError, UnicodeDecodeError) as exc:
            raise MessageError(f"invalid JSON: {exc}") from exc
        if payload is None:
            return cls()
        if not isinstance(payload, dict):
            raise MessageError("request body must be a JSON object")
        hash_value = payload.get("hash")
        max_length = payload.get("maxLength")
        if hash_value is not None and not isinstance(hash_value, str):
            raise MessageError("hash must be a string")
        if max_length is not None and (
            isinstance(max_length, bool) or not isinstance(max_length, int)
        ):
            raise MessageError("maxLength must be an integer")
        return cls(hash=hash_value or "", max_length=max_length or 0)


def _dump(payload):
    return (json.dumps(payload, separators=(",", ":"), ensure_ascii=False) + "\n").encode()


@dataclass
class CrackHashResponse:
    request_id: str

    def to_json(self):
        return _dump({"requestId": self.request_id})


@dataclass
class CrackHashStatus:
    status: str
    data: list | None = None

    def to_json(self):
        return _dump({"status": self.status, "data": self.data})