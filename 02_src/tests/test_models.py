"""Tests for data models and error types."""

import json
import logging

from memories_client.errors import BackendError, ErrorSource, NetworkError, UploadError
from memories_client.logging_config import JSONFormatter
from memories_client.models import (
    RpcRequest,
    TraceEvent,
    TraceKind,
    UploadPhase,
    UploadSession,
    first_result,
)


class TestTraceEvent:
    """Tests for TraceEvent model."""

    def test_request_event_to_dict(self):
        """Serialized kind is the plain string."""
        event = TraceEvent(kind=TraceKind.REQUEST, method="POST", url="http://h/api/A/b", timestamp=5)

        assert event.to_dict() == {
            "kind": "request",
            "method": "POST",
            "url": "http://h/api/A/b",
            "status": None,
            "message": None,
            "timestamp": 5,
        }


class TestRpcModels:
    """Tests for RPC helpers."""

    def test_query_detection(self):
        """Underscore-prefixed names are Queries."""
        assert RpcRequest("/Groups/_listGroupsForUser").is_query
        assert not RpcRequest("/Groups/createGroup").is_query

    def test_first_result(self):
        """Queries unwrap to their first element, Actions pass through."""
        assert first_result([{"groups": ["g1"]}]) == {"groups": ["g1"]}
        assert first_result([]) is None
        assert first_result({"group": "g1"}) == {"group": "g1"}


class TestUploadSession:
    """Tests for UploadSession model."""

    def test_starts_idle(self):
        """A new session has no delegated URL and is idle."""
        session = UploadSession(owner_user="u1", file_name="a.png")

        assert session.phase == UploadPhase.IDLE
        assert session.delegated_url is None
        assert session.object_key is None


class TestErrors:
    """Tests for the error variants."""

    def test_kinds(self):
        """Each variant carries its tag."""
        assert NetworkError("x").kind == "network"
        assert BackendError("x").kind == "backend"
        assert UploadError(403, "Forbidden").kind == "upload"

    def test_upload_error_payload(self):
        """UploadError carries status, status text and the transfer source."""
        error = UploadError(403, "Forbidden", url="https://store/x")

        assert error.message == "Upload failed: 403 Forbidden"
        assert error.to_dict() == {
            "kind": "upload",
            "message": "Upload failed: 403 Forbidden",
            "status": 403,
            "source": "transfer",
            "url": "https://store/x",
            "status_text": "Forbidden",
        }

    def test_default_source_is_rpc(self):
        """Gateway errors default to the rpc source."""
        assert BackendError("bad username").source == ErrorSource.RPC


class TestJSONFormatter:
    """Tests for structured log output."""

    def test_context_is_included(self):
        """extra={'context': ...} ends up in the JSON record."""
        record = logging.LogRecord("memories_client", logging.ERROR, __file__, 1, "failed %s", ("x",), None)
        record.context = {"status": 500}

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "failed x"
        assert data["level"] == "ERROR"
        assert data["context"] == {"status": 500}
