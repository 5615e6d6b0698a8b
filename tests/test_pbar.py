# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

import pytest
from rich.progress import Progress

from qasm2stim._pbar import (
    ConditionalSpinnerColumn,
    PhaseStatusColumn,
    make_progress_bar,
)


def _create_task(mocker, fields, **kwargs):
    task = mocker.Mock()
    task.fields = fields
    for key, value in kwargs.items():
        setattr(task, key, value)
    return task


class TestConditionalSpinnerColumn:
    @pytest.fixture
    def column(self):
        return ConditionalSpinnerColumn()

    @pytest.mark.parametrize("status", ["Success", "Failed", "Cancelled"])
    def test_render_with_final_status_hides_spinner(self, mocker, column, status):
        task = _create_task(mocker, {"final_status": status})
        assert str(column.render(task)) == ""

    @pytest.mark.parametrize("fields", [{}, {"final_status": ""}])
    def test_render_shows_spinner(self, mocker, column, fields):
        task = _create_task(mocker, fields, get_time=mocker.Mock(return_value=0.0))
        assert column.render(task) != ""


class TestPhaseStatusColumn:
    @pytest.fixture
    def column(self):
        return PhaseStatusColumn()

    @pytest.mark.parametrize(
        "status,marker",
        [("Success", "✅"), ("Failed", "❌"), ("Cancelled", "Cancelled")],
    )
    def test_render_final_status(self, mocker, column, status, marker):
        result = str(column.render(_create_task(mocker, {"final_status": status})))
        assert marker in result

    def test_render_message(self, mocker, column):
        task = _create_task(mocker, {"message": "Translating QASM circuit to Stim.."})
        assert str(column.render(task)) == "[Translating QASM circuit to Stim..]"

    def test_render_queued(self, mocker, column):
        task = _create_task(mocker, {"message": "", "final_status": ""})
        assert str(column.render(task)) == "[Queued]"


@pytest.mark.parametrize("is_jupyter", [False, True])
def test_make_progress_bar(is_jupyter):
    progress = make_progress_bar(is_jupyter=is_jupyter)

    assert isinstance(progress, Progress)
    assert len(progress.columns) == 5
    assert progress.live.auto_refresh is (not is_jupyter)
