# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from urlpinger.errors import ErrorCategory, ProbeError
from urlpinger.http import HttpResponse, StubHttpClient
from urlpinger.models import ProbeRecord
from urlpinger.prober import Prober


def _ok(headers=None, elapsed_ms=5):
    return HttpResponse(
        ok=True,
        status_code=200,
        reason_phrase="OK",
        headers=headers or {},
        url="https://srv",
        elapsed_ms=elapsed_ms,
    )


def test_probe_builds_record_in_configured_order():
    stub = StubHttpClient({"https://srv": _ok({"server": "nginx", "content-type": "text/html", "host": "srv"})})
    record = Prober(stub, ("Content-Type", "Server")).probe("https://srv")
    assert record.status_line == "200 OK"
    assert record.latency_ms == 5
    assert record.host == "srv"
    assert list(record.headers.items()) == [("Content-Type", "text/html"), ("Server", "nginx")]
    assert stub.requests[0].method == "GET"


def test_probe_has_one_entry_per_selected_name():
    stub = StubHttpClient({"https://srv": _ok()})
    record = Prober(stub, ("",)).probe("https://srv")
    assert record.headers == {"": ""}
    assert record.host == ""


def test_probe_clamps_negative_latency():
    stub = StubHttpClient({"https://srv": _ok(elapsed_ms=-3)})
    assert Prober(stub).probe("https://srv").latency_ms == 0


def test_probe_failure_raises_probe_error():
    stub = StubHttpClient(
        {
            "https://down": HttpResponse(
                ok=False,
                error_message="connection refused",
                error_category=ErrorCategory.CONNECTION_ERROR,
            )
        }
    )
    with pytest.raises(ProbeError) as excinfo:
        Prober(stub).probe("https://down")
    assert excinfo.value.url == "https://down"
    assert excinfo.value.category == ErrorCategory.CONNECTION_ERROR
    assert "connection refused" in str(excinfo.value)


def test_probe_record_rejects_negative_latency():
    with pytest.raises(ValueError):
        ProbeRecord(status_line="200 OK", latency_ms=-1)
