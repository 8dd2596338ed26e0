"""
In-memory stand-ins for ``requests.Session`` used by the tests.

Routes are registered per ``(method, url)``; a route is either a
:class:`FakeResponse`, an exception instance to raise, or a callable that
receives the request keyword arguments and returns one of those.
"""

import gzip
import io
import json

import requests
from requests.structures import CaseInsensitiveDict


class FakeRaw:
    """Mimics urllib3's response stream: the body is only decoded on request."""

    def __init__(self, content, content_encoding=None):
        if content_encoding == "gzip":
            content = gzip.compress(content)
        self._buf = io.BytesIO(content)
        self.content_encoding = content_encoding
        self.decode_content = False

    def read(self, amt=None):
        if self.decode_content and self.content_encoding == "gzip":
            # Decoding needs the whole member, so ``amt`` is ignored here
            return gzip.decompress(self._buf.read())
        return self._buf.read(amt)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, headers=None, content=b"", text=None, content_encoding=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text
        self.headers = CaseInsensitiveDict(headers or {})
        if content_encoding:
            self.headers["Content-Encoding"] = content_encoding
        self.raw = FakeRaw(content, content_encoding)
        self.closed = False

    @property
    def text(self):
        if self._text is not None:
            return self._text
        return json.dumps(self._payload) if self._payload is not None else ""

    def json(self):
        if self._payload is None:
            raise requests.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self):
        self.routes = {}
        self.calls = []

    def route(self, method, url, handler):
        self.routes[(method.upper(), url)] = handler

    def calls_to(self, method, url=None):
        return [c for c in self.calls if c[0] == method.upper() and (url is None or c[1] == url)]

    def _dispatch(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        handler = self.routes.get((method, url))
        if handler is None:
            return FakeResponse(404, {"error": f"no route for {method} {url}"})
        if callable(handler):
            handler = handler(**kwargs)
        if isinstance(handler, Exception):
            raise handler
        return handler

    def get(self, url, **kwargs):
        return self._dispatch("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._dispatch("POST", url, **kwargs)


class StrapiBackend:
    """Accepts every create and upload, handing out increasing ids."""

    def __init__(self, session, api_url="http://strapi.test/api"):
        self.api_url = api_url
        self.next_id = 1
        self.created = {}
        self.uploads = []
        for collection in ("categories", "articles", "tours", "pages"):
            session.route("POST", f"{api_url}/{collection}", self._creator(collection))
        session.route("POST", f"{api_url}/upload", self._upload)

    def _take_id(self):
        value = self.next_id
        self.next_id += 1
        return value

    def _creator(self, collection):
        def create(**kwargs):
            entry_id = self._take_id()
            self.created.setdefault(collection, []).append(kwargs["json"]["data"])
            return FakeResponse(201, {"data": {"id": entry_id, **kwargs["json"]["data"]}})
        return create

    def _upload(self, **kwargs):
        filename = kwargs["files"]["files"][0]
        asset_id = self._take_id()
        self.uploads.append(filename)
        return FakeResponse(201, [{"id": asset_id, "url": f"/uploads/{filename}"}])
