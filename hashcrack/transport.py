"""Sending XML bodies over HTTP."""

import urllib.error
import urllib.request


class DeliveryError(Exception):
    """A message was not accepted by its receiver."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


def send_xml(url, method, body, timeout=None):
    """Send body as application/xml; raise DeliveryError unless the reply is 200.

    A URL without a scheme is sent over plain http.
    """
    if "://" not in url:
        url = "http://" + url
    request = urllib.request.Request(
        url, data=body, method=method, headers={"Content-Type": "application/xml"}
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            status = response.status
            response.read()
    except urllib.error.HTTPError as exc:
        status = exc.code
        exc.close()
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise DeliveryError(f"failed to send HTTP request: {exc}") from exc
    if status != 200:
        raise DeliveryError("received non-OK HTTP status", status)