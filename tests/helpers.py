import json
from unittest.mock import Mock


def make_response(body=None, status_code=200, text=None):
    """Builds a Mock standing in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response.text = text
    if body is not None:
        response.json.return_value = body
    else:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    return response
