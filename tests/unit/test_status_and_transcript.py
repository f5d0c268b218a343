# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
from datetime import datetime

from httpprobe.log import setup_logging
from httpprobe.models import Status, StatusIndicator
from httpprobe.models.status import HISTORY_LIMIT
from httpprobe.transcript import Transcript


def test_setup_logging_quiets_transport_loggers_unless_debugging():
    assert setup_logging("info") == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING

    assert setup_logging("debug") == logging.DEBUG
    assert logging.getLogger("httpcore").level == logging.DEBUG

    assert setup_logging("nonsense") == logging.WARNING


def test_status_indicator_labels():
    status = StatusIndicator()
    assert status.state == Status.IDLE
    assert str(status) == "Ready"

    status.pending()
    assert (status.state, status.label) == (Status.PENDING, "Requesting...")
    status.success(204)
    assert (status.state, status.label) == (Status.SUCCESS, "Success (204)")
    status.error()
    assert (status.state, status.label) == (Status.ERROR, "Error")
    assert status.history == [Status.PENDING, Status.SUCCESS, Status.ERROR]


def test_transcript_prepends_timestamped_entries():
    times = iter([datetime(2024, 5, 1, 9, 0, 1), datetime(2024, 5, 1, 9, 0, 2)])
    transcript = Transcript(clock=lambda: next(times))

    first = transcript.log("first")
    transcript.log("second\nline")

    assert first == "[09:00:01] first"
    assert transcript.entries == ["[09:00:02] second\nline", "[09:00:01] first"]
    assert list(transcript) == transcript.entries
    assert transcript.text() == "[09:00:02] second\nline\n[09:00:01] first"
    assert len(transcript) == 2
    assert "second" in transcript
    assert "third" not in transcript
    assert 3 not in transcript


def test_status_history_keeps_only_recent_transitions():
    status = StatusIndicator(history_limit=3)
    status.pending()
    status.error()
    status.pending()
    status.success(200)
    status.pending()
    assert status.history == [Status.PENDING, Status.SUCCESS, Status.PENDING]

    default = StatusIndicator()
    for _ in range(HISTORY_LIMIT * 2):
        default.pending()
    assert len(default.history) == HISTORY_LIMIT
