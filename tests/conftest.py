from unittest.mock import MagicMock

import pytest

from tests.helpers import fake_response


@pytest.fixture
def upstream():
    """Returns a factory for a fake requests.post that answers with `payload`."""
    def _make(payload=None, text=None, exc=None):
        post = MagicMock()
        if exc is not None:
            post.side_effect = exc
        else:
            post.return_value = fake_response(payload, text)
        return post
    return _make
