from unittest.mock import patch

import pytest

from fmark.browser import Browser
from fmark.errors import CollaboratorSpawnError


@patch("fmark.browser.subprocess.Popen")
def test_open_spawns_detached(mock_popen):
    Browser("firefox").open("https://example.org")

    args, kwargs = mock_popen.call_args
    assert args[0] == ["firefox", "https://example.org"]
    assert kwargs["start_new_session"] is True


@patch("fmark.browser.subprocess.Popen")
def test_open_spawn_failure(mock_popen):
    mock_popen.side_effect = PermissionError(13, "Permission denied")

    with pytest.raises(CollaboratorSpawnError) as info:
        Browser("firefox").open("https://example.org")

    assert info.value.program == "firefox"
    assert "Permission denied" in str(info.value)
