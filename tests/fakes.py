"""
Test doubles shared across test modules.
"""


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, json_body=None, text=None, content_type="application/json", content=None):
        self.status_code = status_code
        self._json_body = json_body
        self.text = text if text is not None else ""
        self.content = content if content is not None else self.text.encode("utf-8")
        self.headers = {"Content-Type": content_type} if content_type else {}

    def json(self):
        if self._json_body is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json_body
