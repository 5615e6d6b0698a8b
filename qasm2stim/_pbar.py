# SPDX-FileCopyrightText: 2026 Qoro Quantum Ltd <divi@qoroquantum.de>
#
# SPDX-License-Identifier: Apache-2.0

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    TextColumn,
)
from rich.text import Text

FINAL_STATUSES = ("Success", "Failed", "Cancelled")


class ConditionalSpinnerColumn(ProgressColumn):
    def __init__(self):
        super().__init__()
        self.spinner = SpinnerColumn("point")

    def render(self, task):
        if task.fields.get("final_status") in FINAL_STATUSES:
            return Text("")

        return self.spinner.render(task)


class PhaseStatusColumn(ProgressColumn):
    """Shows the current conversion phase, or the final outcome once known."""

    def render(self, task):
        final_status = task.fields.get("final_status")

        if final_status == "Success":
            return Text("• Success! ✅", style="bold green")
        elif final_status == "Failed":
            return Text("• Failed! ❌", style="bold red")
        elif final_status == "Cancelled":
            return Text("• Cancelled", style="yellow")

        return Text(f"[{task.fields.get('message') or 'Queued'}]")


def make_progress_bar(is_jupyter: bool = False) -> Progress:
    return Progress(
        TextColumn("[bold blue]{task.fields[job_name]}"),
        BarColumn(),
        MofNCompleteColumn(),
        ConditionalSpinnerColumn(),
        PhaseStatusColumn(),
        # For jupyter notebooks, refresh manually instead
        auto_refresh=not is_jupyter,
        # Give a dummy positive value if is_jupyter
        refresh_per_second=10 if not is_jupyter else 999,
    )
